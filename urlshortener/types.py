from typing import Any
from collections.abc import Callable


# Type aliases for Python dictionaries
type LambdaEvent = dict[str, Any]
type LambdaContext = Any
type LambdaResponse = dict[str, Any]
type AppConfig = dict[str, Any]
type BackendOptions = dict[str, Any]

# Produces a fresh short code on every call
type ShortcodeGenerator = Callable[[], str]
