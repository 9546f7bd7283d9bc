from __future__ import annotations

import inspect
import logging
import shutil
import subprocess
from typing import Any, Awaitable, Callable, Dict, List, Optional, Protocol

logger = logging.getLogger(__name__)


class SignatureProvider(Protocol):
    """Static analyzer that extracts the entry point's argument signature from source code.

    parse() returns JSON text, either {"type": "Invalid", "error": ...} or
    {"type": "Valid", "args": [...]}; see argschema.signature.decode_result().

    Attributes:
        initialize: Prepares the analyzer. Idempotent, and must complete before parse().
        parse: Analyzes `code` written in `language`.
    """

    async def initialize(self) -> None: ...

    def parse(self, language: str, code: str) -> str: ...


class CallableProvider(SignatureProvider):
    """Provider backed by one parse function per language, e.g. a set of native bindings
    like {"python3": parse_python, "go": parse_go}. The optional `init` hook (sync or async)
    runs once, on the first initialize()."""

    _parsers: Dict[str, Callable[[str], str]]
    _init: Optional[Callable[[], Optional[Awaitable[Any]]]]
    _ready: bool

    def __init__(
        self,
        parsers: Dict[str, Callable[[str], str]],
        init: Optional[Callable[[], Optional[Awaitable[Any]]]] = None,
    ):
        self._parsers = dict(parsers)
        self._init = init
        self._ready = False

    async def initialize(self) -> None:
        if self._ready:
            return
        if self._init is not None:
            result = self._init()
            if inspect.isawaitable(result):
                await result
        self._ready = True

    def parse(self, language: str, code: str) -> str:
        if language not in self._parsers:
            raise Exception(f"no parser for language: {language}")
        return self._parsers[language](code)


class CommandProvider(SignatureProvider):
    """Provider that shells out to an analyzer executable.

    Each parse runs `command + [language]` with the code on stdin, and expects the JSON
    result on stdout. A non-zero exit raises subprocess.CalledProcessError.
    """

    _command: List[str]
    _exe: Optional[str]
    _timeout: Optional[float]

    def __init__(self, command: List[str], timeout: Optional[float] = None):
        if len(command) == 0:
            raise ValueError("analyzer command must not be empty")
        self._command = list(command)
        self._exe = None
        self._timeout = timeout

    async def initialize(self) -> None:
        if self._exe is not None:
            return
        exe = shutil.which(self._command[0])
        if exe is None:
            raise FileNotFoundError(f"analyzer not found: {self._command[0]}")
        logger.debug("using analyzer %s", exe)
        self._exe = exe

    def parse(self, language: str, code: str) -> str:
        if self._exe is None:
            raise Exception("CommandProvider.parse() called before initialize()")
        proc = subprocess.run(
            [self._exe, *self._command[1:], language],
            input=code,
            capture_output=True,
            text=True,
            check=True,
            timeout=self._timeout,
        )
        return proc.stdout
