from collections.abc import Callable
from datetime import datetime
from typing import Any


# Zero-argument callable returning the current (aware) time
type Clock = Callable[[], datetime]

# Parsed configuration documents
type AppConfig = dict[str, Any]
