__version__ = "0.1.0"

from .checker import CommentSpellChecker
from .core.errors import ConfigurationError, EngineInvocationError, SpellCheckError
from .document import Comment, SourceDocument
from .engine import SpellEngineConfig, resolve_engine
from .models import CommentFailure, ScanResult
from .stopwords import Stopwords

__all__ = [
    "__version__",
    "CommentSpellChecker",
    "ConfigurationError",
    "EngineInvocationError",
    "SpellCheckError",
    "Comment",
    "SourceDocument",
    "SpellEngineConfig",
    "resolve_engine",
    "CommentFailure",
    "ScanResult",
    "Stopwords",
]
