from .pwgen import (generate, generate_standard, generate_custom,
                    generate_template, GenerationRequest, GenerationResult,
                    ConfigurationError)
from .sampler import GenerationError, EmptyPoolError, EQUAL, TOTAL
from .template import TemplateSyntaxError
from .phonetic import to_phonetic

__version__ = '0.1.0'
