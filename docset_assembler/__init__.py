"""Package HTML documentation as a Dash docset."""

from .assembler import DocsetAssembler, DocsetBundle, create_docset
from .config import DocsetConfig, SearchEntry, load_config
from .errors import ConfigurationError, DatabaseError, DocsetError, FilesystemError
from .plist import render_info_plist

__all__ = [
    "ConfigurationError",
    "DatabaseError",
    "DocsetAssembler",
    "DocsetBundle",
    "DocsetConfig",
    "DocsetError",
    "FilesystemError",
    "SearchEntry",
    "create_docset",
    "load_config",
    "render_info_plist",
]

__version__ = "0.1.0"
