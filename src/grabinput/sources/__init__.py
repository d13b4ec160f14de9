"""Source recognizers for grabinput."""

from .stdin import StdinRecognizer
from .file import FileRecognizer
from .text import TextRecognizer
