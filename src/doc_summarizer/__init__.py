# Doc Summarizer - Main Package

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("doc_summarizer")
except PackageNotFoundError:
    __version__ = "dev"
