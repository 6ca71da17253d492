# ShellUI
# (interactive password generator)
#

import textwrap
from inspect import signature

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.completion import WordCompleter, NestedCompleter
from blessed import Terminal
import pyperclip

from . import pwgen
from .sampler import GenerationError, MODES
from .template import compile_template
from .stats import format_report

FILTERS = ('similar', 'programming', 'none')


class BaseInput:

    def __init__(self):
        self._session = PromptSession(complete_while_typing=True)
        self._completer = None

    def input(self, prompt):
        """Input with completion and history."""
        return self._session.prompt(FormattedText([('bold', prompt)]),
                                    completer=self._completer)


class NestedOptions(dict):

    """A fake dictionary that supports partial keys.

    `get(key)` returns value also for `key` that is not contained in dict, but:
    * is a prefix of another key
    * is unique prefix, i.e. only a single key matches

    This is used to persuade NestedCompleter to allow prefix shortcuts.

    """

    def __init__(self, options):
        dict.__init__(self, {k: None for k in options})

    def get(self, key, default=None):
        candidates = tuple(k for k in self.keys() if k.startswith(key.lower()))
        if len(candidates) == 1:
            return self[candidates[0]]
        return default


class ShellInput(BaseInput):

    def __init__(self, commands):
        BaseInput.__init__(self)
        completions = NestedOptions(commands)
        completions['mode'] = WordCompleter(MODES)
        completions['filter'] = WordCompleter(FILTERS)
        self._completer = NestedCompleter(completions)


class ShellUI:

    """Shell allows user to generate passwords with changing options.

    Options are initialized from Config and modified by shell commands.
    Generated password is kept for `copy` and `stats` commands.

    The entry point is :meth:`start`.

    """

    def __init__(self, config):
        self._length = config.length
        self._mode = config.mode
        self._alphabets = config.alphabets
        self._avoid_similar = config.avoid_similar
        self._avoid_programming = config.avoid_programming
        self._phonetic = config.phonetic
        self._result = None
        self._term = Terminal()
        self._commands = []
        self._command_map = {}  # name: (func, params)
        self._fill_commands()
        self._quit = False

    def start(self):
        """Start the shell. Returns when done."""
        try:
            self.mainloop()
        except (KeyboardInterrupt, EOFError):
            # Ctrl-C, Ctrl-D
            pass

    def mainloop(self):
        """The main loop."""
        session = ShellInput(self._commands)
        while not self._quit:
            cmdline = session.input("> ")
            if not cmdline.strip():
                continue
            command, *args = cmdline.split(None, 1)
            func = None
            params = []
            if command in self._commands:
                func, params = self._command_map[command]
            else:
                filtered = self._filter_commands(command)
                if len(filtered) == 1:
                    func, params = self._command_map[filtered[0]]
            if func:
                try:
                    if len(params) > 1 and len(args):
                        args = args[0].split(None, len(params)-1)
                    func(*args)
                except KeyboardInterrupt:
                    print("^C")
                except (TypeError, GenerationError) as e:
                    print(e)
            else:
                print("Unknown command. Try 'help'.")

    ###############
    # UI Commands #
    ###############

    def cmd_gen(self, length=None):
        """Generate password from selected alphabets"""
        if length is not None:
            try:
                value = int(length)
            except ValueError:
                value = -1
            if value < 0:
                return print("Invalid length:", length)
            self._length = value
        self._show(pwgen.generate(pwgen.GenerationRequest(
            length=self._length, mode=self._mode,
            alphabets=pwgen.parse_alphabets(self._alphabets),
            avoid_similar=self._avoid_similar,
            avoid_programming=self._avoid_programming,
            phonetic=self._phonetic)))

    def cmd_template(self, template):
        """Generate password from a template

        Template characters:

        * ``-X`` literal X
        * ``.X`` character of class X, lowercase
        * ``:X`` character of class X, uppercase
        * ``l v c d h o b a * !`` class tags, random case
        * other characters are copied

        """
        self._show(pwgen.generate_template(
            template, self._avoid_similar, self._avoid_programming,
            self._phonetic))

    def cmd_explain(self, template):
        """Print instructions of a template"""
        instructions = list(compile_template(template))
        for n, instr in enumerate(instructions, 1):
            print(("[%d]" % n).ljust(6), instr)

    def cmd_mode(self, mode=None):
        """Set or print distribution mode (equal, total)"""
        if mode is None:
            return print(self._mode)
        candidates = [m for m in MODES if m.startswith(mode.lower())]
        if len(candidates) != 1:
            return print("Unknown mode:", mode)
        self._mode = candidates[0]

    def cmd_alphabets(self, letters=None):
        """Set or print alphabets (l=lower, u=upper, d=digit, s=symbol)"""
        if letters is None:
            return print(self._alphabets)
        if not set(letters) <= set(pwgen.ALPHABET_LETTERS):
            return print("Unknown alphabet letters:", letters)
        self._alphabets = letters

    def cmd_filter(self, name=None):
        """Toggle character filter (similar, programming) or disable all"""
        if name is not None:
            candidates = [f for f in FILTERS if f.startswith(name.lower())]
            if len(candidates) != 1:
                return print("Unknown filter:", name)
            name = candidates[0]
            if name == 'similar':
                self._avoid_similar = not self._avoid_similar
            elif name == 'programming':
                self._avoid_programming = not self._avoid_programming
            else:
                self._avoid_similar = self._avoid_programming = False
        print("avoid similar:", 'on' if self._avoid_similar else 'off',
              " avoid programming:", 'on' if self._avoid_programming else 'off')

    def cmd_phonetic(self):
        """Toggle phonetic output"""
        self._phonetic = not self._phonetic
        print("phonetic:", 'on' if self._phonetic else 'off')

    def cmd_copy(self):
        """Copy last generated password"""
        if not self._result:
            return print("Nothing generated yet.")
        self._copy(self._result.password)

    def cmd_stats(self):
        """Print statistics of last generated password"""
        if not self._result:
            return print("Nothing generated yet.")
        for line in format_report(self._result.stats, self._term):
            print(line)

    def cmd_quit(self):
        """Quit"""
        self._quit = True

    def cmd_help(self, command=None):
        """Print list of all commands or full help for a command"""
        filtered_commands = []
        if command:
            filtered_commands = self._filter_commands(command)
            if len(filtered_commands) == 0:
                print("Not found.")
                return
            if len(filtered_commands) == 1:
                command = filtered_commands[0]
                self._print_help(command, full=True)
                return
        for command in (filtered_commands or self._commands):
            self._print_help(command)

    #################
    # Other Utility #
    #################

    def _copy(self, text):
        """Wraps copy-to-clipboard function to allow overriding."""
        pyperclip.copy(text)

    def _show(self, result):
        self._result = result
        print(result.text)

    def _fill_commands(self):
        """Gather all commands and their signatures into `_command_map`.

        Commands are all methods beginning with prefix 'cmd_'.

        """
        self._commands = [name[4:] for name in dir(self)
                          if name.startswith('cmd_')]
        for command in self._commands:
            func = getattr(self, 'cmd_' + command)
            params = list(signature(func).parameters.values())
            self._command_map[command] = (func, params)

    def _filter_commands(self, start_text):
        return sorted(name for name in self._commands
                      if name.startswith(start_text))

    def _print_help(self, command, full=False):
        """Print help text for a `command` as found in docstring.

        Prints only one-line summary by default.
        Enable `full` to print full help text.

        """
        func, params = self._command_map[command]
        params_str = ' '.join(
            ('%s' if p.default == p.empty else '[%s]') % p.name
            for p in params)
        docstring = func.__doc__ + '\n'
        docshort, docrest = docstring.split('\n', 1)
        print(command.ljust(10),
              params_str.ljust(12),
              docshort.strip())
        if full and docrest:
            print('\n', textwrap.dedent(docrest).strip(), sep='')
