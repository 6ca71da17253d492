import argparse
import configparser
from pathlib import Path

from blessed import Terminal
import pyperclip

from . import pwgen, shell
from .alphabet import CLASS_TAGS
from .sampler import GenerationError, EQUAL, TOTAL, MODES
from .stats import format_report
from .template import template_length

DATA_DIR = Path('~/.pwpattern')
DEFAULT_CONFIG = DATA_DIR / 'pwpattern.conf'

TAG_NAMES = {
    'l': 'lowercase letters',
    'v': 'vowels',
    'c': 'consonants',
    'd': 'digits',
    'h': 'hexadecimal digits',
    'o': 'octal digits',
    'b': 'binary digits',
    'a': 'lowercase letters and digits',
    '*': 'lowercase letters, digits and symbols',
    '!': 'symbols',
}


class Config:

    """Defaults for generator options, loaded from INI file."""

    _int_keys = ('length', 'count')
    _bool_keys = ('avoid_similar', 'avoid_programming', 'phonetic')

    def __init__(self, config_file=None):
        self.length = pwgen.DEFAULT_LENGTH
        self.count = pwgen.DEFAULT_COUNT
        self.mode = EQUAL
        self.alphabets = 'lud'
        self.avoid_similar = False
        self.avoid_programming = False
        self.phonetic = False
        self.custom_pool = None
        if config_file is not None:
            self.load(config_file)

    def load(self, config_file):
        config_file = Path(config_file).expanduser()
        config = configparser.ConfigParser()
        config.read(config_file, encoding='utf-8')
        for section in config.sections():
            if section != 'pwpattern':
                print(f"WARNING: unknown section {section!r} in config {str(config_file)!r}")
                continue
            section = config[section]
            for key in section:
                try:
                    self._load_key(section, key)
                except ValueError as e:
                    print(f"WARNING: invalid value of [{section.name}] {key!r} "
                          f"in config {str(config_file)!r}: {e}")

    def _load_key(self, section, key):
        if key in self._int_keys:
            setattr(self, key, section.getint(key))
        elif key in self._bool_keys:
            setattr(self, key, section.getboolean(key))
        elif key == 'mode':
            value = section[key].strip().lower()
            if value not in MODES:
                raise ValueError(f"expected one of {', '.join(MODES)}")
            self.mode = value
        elif key == 'alphabets':
            value = section[key].strip()
            if not set(value) <= set(pwgen.ALPHABET_LETTERS):
                raise ValueError(f"expected some of {''.join(pwgen.ALPHABET_LETTERS)!r}")
            self.alphabets = value
        else:
            print(f"WARNING: unknown key [{section.name}] {key!r}")

    def override(self, **options):
        """Apply command line options which were given (not None)."""
        for key, value in options.items():
            if value is not None:
                setattr(self, key, value)
        return self


def _copy(text):
    """Wraps copy-to-clipboard function to allow overriding."""
    pyperclip.copy(text)


def print_results(results, verbose=False, copy=False):
    term = Terminal()
    for result in results:
        print(result.text)
        if verbose:
            for line in format_report(result.stats, term):
                print('   ', line)
    if copy and results:
        _copy(results[-1].password)
        print(term.bright_blue("Copied to clipboard."))


def run_gen(config_file, verbose, copy, **options):
    cfg = Config(config_file).override(**options)
    if cfg.custom_pool:
        request = pwgen.GenerationRequest(length=cfg.length, mode=TOTAL,
                                          custom_pool=cfg.custom_pool,
                                          avoid_similar=cfg.avoid_similar,
                                          avoid_programming=cfg.avoid_programming,
                                          phonetic=cfg.phonetic)
    else:
        request = pwgen.GenerationRequest(length=cfg.length, mode=cfg.mode,
                                          alphabets=pwgen.parse_alphabets(cfg.alphabets),
                                          avoid_similar=cfg.avoid_similar,
                                          avoid_programming=cfg.avoid_programming,
                                          phonetic=cfg.phonetic)
    print_results(pwgen.generate_many(request, cfg.count), verbose, copy)


def run_template(config_file, template, verbose, copy, **options):
    cfg = Config(config_file).override(**options)
    # check syntax before generating anything
    template_length(template)
    request = pwgen.GenerationRequest(template=template,
                                      avoid_similar=cfg.avoid_similar,
                                      avoid_programming=cfg.avoid_programming,
                                      phonetic=cfg.phonetic)
    print_results(pwgen.generate_many(request, cfg.count), verbose, copy)


def run_tags():
    print("Template syntax:")
    print("  -X".ljust(8), "literal X")
    print("  .X".ljust(8), "character of class X, lowercase")
    print("  :X".ljust(8), "character of class X, uppercase")
    print()
    print("Class tags:")
    for tag, chars in CLASS_TAGS.items():
        print(f"  {tag}".ljust(8), TAG_NAMES[tag].ljust(40), chars)


def run_shell(config_file):
    cfg = Config(config_file)
    shell_ui = shell.ShellUI(cfg)
    shell_ui.start()


def parse_args(argv=None):
    """Process command line args."""
    ap = argparse.ArgumentParser(prog="pwpattern",
                                 description="Password generator",
                                 formatter_class=argparse.RawTextHelpFormatter)

    # Sub-commands
    sp = ap.add_subparsers()
    ap_gen = sp.add_parser("gen", aliases=['g'],
                           help="generate passwords from alphabets (default)")
    ap_gen.set_defaults(func=run_gen)
    ap_template = sp.add_parser("template", aliases=['t'],
                                help="generate passwords from a template")
    ap_template.set_defaults(func=run_template)
    ap_tags = sp.add_parser("tags", help="print template syntax and class tags")
    ap_tags.set_defaults(func=run_tags)
    ap_shell = sp.add_parser("shell", aliases=['sh'],
                             help="start interactive shell")
    ap_shell.set_defaults(func=run_shell)

    for subparser in (ap_gen, ap_template, ap_shell):
        subparser.add_argument('-c', '--config', dest='config_file',
                               default=DEFAULT_CONFIG,
                               help="config file (default: %(default)s)")

    for subparser in (ap_gen, ap_template):
        subparser.add_argument('-n', dest='count', type=int,
                               help="number of passwords to generate "
                                    f"(default: {pwgen.DEFAULT_COUNT})")
        subparser.add_argument('-s', '--avoid-similar', dest='avoid_similar',
                               action='store_const', const=True,
                               help="skip similar looking characters (1 l I O 0 ...)")
        subparser.add_argument('-P', '--avoid-programming', dest='avoid_programming',
                               action='store_const', const=True,
                               help="skip characters used in programming ($ \" & / ...)")
        subparser.add_argument('--phonetic', action='store_const', const=True,
                               help="print password spelled with NATO alphabet")
        subparser.add_argument('-v', '--verbose', action='store_true',
                               help="print statistics of each password")
        subparser.add_argument('--copy', action='store_true',
                               help="copy the last password to clipboard")

    ap_gen.add_argument('-l', dest='length', type=int,
                        help="length of password "
                             f"(default: {pwgen.DEFAULT_LENGTH})")
    ap_gen.add_argument('-a', dest='alphabets',
                        help="alphabets to use: l=lower, u=upper, d=digit, s=symbol "
                             "(default: lud)")
    ap_gen.add_argument('-p', '--pool', dest='custom_pool',
                        help="use only characters from this string "
                             "(overrides -a and mode)")
    mode_grp = ap_gen.add_mutually_exclusive_group()
    mode_grp.add_argument('--equal', dest='mode', action='store_const', const=EQUAL,
                          help="each alphabet is equally likely (default)")
    mode_grp.add_argument('--total', dest='mode', action='store_const', const=TOTAL,
                          help="each character is equally likely")

    ap_template.add_argument('template',
                             help="Template of password. See `pwpattern tags`.")

    args = ap.parse_args(args=argv)

    if 'func' not in args:
        ap_gen.parse_args(args=[], namespace=args)

    return args


def main(argv=None):
    """Main program

    :param argv: Used in tests. Default is sys.argv
    :return: Exit status
    """
    args = parse_args(argv)
    run_func = args.func
    delattr(args, 'func')
    try:
        run_func(**vars(args))
    except GenerationError as e:
        print(e)
        return 1
    return 0
