"""
CheckerSession — Explicit state for one writer.

A session owns its vocabulary store, its debouncer and the last text it
was given. Sessions never share a word list, so two writers checking
against different levels do not interfere.

Control flow:
- submit(text) debounces a check of the text
- load_wordlist()/select_level() swap the store, then re-check the text

A session created inside a running event loop debounces on that loop;
one created outside any loop debounces on timer threads. A debounced
check that comes due during a load waits for the load to finish.
"""

import asyncio
from typing import Callable, Optional
from uuid import uuid4

from wordlevel.core.config import Settings, WordlistLevel, load_settings
from wordlevel.core.errors import VocabularyLoadError
from wordlevel.core.logging import LogChannel, get_logger
from wordlevel.core.scheduler import Debouncer, TimerFactory, loop_timer_factory
from wordlevel.nlp.interfaces import Tagger
from wordlevel.validation.document import ValidationResult, validate
from wordlevel.vocab.loader import fetch_wordlist
from wordlevel.vocab.store import VocabularyStore

ResultCallback = Callable[[ValidationResult], None]
AlertCallback = Callable[[str], None]

_vocab_log = get_logger(LogChannel.VOCAB)
_schedule_log = get_logger(LogChannel.SCHEDULE)


def _default_timer_factory() -> Optional[TimerFactory]:
    """Schedule on the running event loop if there is one, else on threads."""
    try:
        return loop_timer_factory(asyncio.get_running_loop())
    except RuntimeError:
        return None


class CheckerSession:
    """
    One writer's checking session.

    Loads are serialized by request number: when selections overlap, only
    the most recent one may replace the store. While any load is in
    flight the session is busy and rejects new input.
    """

    def __init__(
        self,
        tagger: Tagger,
        settings: Optional[Settings] = None,
        on_result: Optional[ResultCallback] = None,
        on_alert: Optional[AlertCallback] = None,
        timer_factory: Optional[TimerFactory] = None,
        session_id: Optional[str] = None,
    ) -> None:
        self.session_id = session_id or str(uuid4())
        self.settings = settings if settings is not None else load_settings()
        self.tagger = tagger
        self.store = VocabularyStore()
        self.last_result: Optional[ValidationResult] = None
        self.last_alert: Optional[str] = None

        self._on_result = on_result
        self._on_alert = on_alert
        self._text = ""
        self._load_seq = 0
        self._loads_in_flight = 0
        self._check_deferred = False
        if timer_factory is None:
            timer_factory = _default_timer_factory()
        self._debouncer = Debouncer(self.settings.debounce_ms, self._debounced_check, timer_factory)

        self._vlog = _vocab_log.bind(session_id=self.session_id)
        self._slog = _schedule_log.bind(session_id=self.session_id)

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def levels(self) -> list[WordlistLevel]:
        """Selectable word list levels."""
        return list(self.settings.wordlists)

    @property
    def busy(self) -> bool:
        """True while a word list load is in flight."""
        return self._loads_in_flight > 0

    @property
    def text(self) -> str:
        return self._text

    @property
    def pending(self) -> bool:
        """True while a debounced check is waiting."""
        return self._debouncer.pending

    # -------------------------------------------------------------------------
    # Word lists
    # -------------------------------------------------------------------------

    async def start(self) -> bool:
        """Load the first configured level."""
        if not self.settings.wordlists:
            self._vlog.warning("no_wordlists_configured")
            self._alert("No word lists are configured. Check the settings file.")
            return False
        return await self.load_wordlist(self.settings.wordlists[0].file)

    async def select_level(self, name: str) -> bool:
        """
        Load the level with this display name.

        Raises:
            KeyError: If no level has that name
        """
        level = self.settings.get_level(name)
        if level is None:
            raise KeyError(f"Unknown level '{name}'")
        return await self.load_wordlist(level.file)

    async def load_wordlist(self, source: str) -> bool:
        """
        Load a word list and make it the active one.

        On failure the store is reset to empty and an alert is raised.
        Returns True only if this load's table became active.
        """
        self._load_seq += 1
        request = self._load_seq
        self._loads_in_flight += 1
        self._vlog.info("wordlist_load_started", source=source, request=request)

        table = None
        error: Optional[VocabularyLoadError] = None
        try:
            table = await fetch_wordlist(
                source,
                base_dir=self.settings.wordlist_base,
                timeout=self.settings.http_timeout,
            )
        except VocabularyLoadError as e:
            error = e
        finally:
            self._loads_in_flight -= 1

        if request != self._load_seq:
            outcome = "error" if error is not None else "loaded"
            self._vlog.verbose("stale_load_discarded", source=source, request=request, outcome=outcome)
            self._run_deferred_check()
            return False

        if error is not None:
            self.store.clear()
            self._vlog.error("wordlist_load_failed", source=error.source, reason=error.reason, request=request)
            self._alert(
                f"Could not load word list: {error.source}\n"
                "Check that the file exists and contains valid JSON."
            )
            self._run_deferred_check()
            return False

        self.store.replace(table, source=source)
        self._vlog.info("wordlist_loaded", source=source, entries=len(table), request=request)

        # Re-check what was already typed against the new list
        self._check_deferred = False
        self.check()
        return True

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def submit(self, text: str) -> bool:
        """
        Record new input and schedule a debounced check.

        Returns False (and ignores the input) while a load is in flight.
        """
        if self.busy:
            self._slog.verbose("input_rejected_busy", chars=len(text))
            return False
        self._text = text
        self._debouncer.trigger()
        return True

    def flush(self) -> bool:
        """Run a pending debounced check immediately."""
        return self._debouncer.flush()

    def check(self, text: Optional[str] = None) -> ValidationResult:
        """Validate now (optionally replacing the text) and emit the result."""
        if text is not None:
            self._text = text
        result = validate(self._text, self.tagger, self.store)
        self.last_result = result
        if self._on_result is not None:
            self._on_result(result)
        return result

    def _debounced_check(self) -> None:
        if self.busy:
            self._check_deferred = True
            self._slog.verbose("check_deferred_busy")
            return
        self.check()

    def _run_deferred_check(self) -> None:
        if self._check_deferred and not self.busy:
            self._check_deferred = False
            self.check()

    def close(self) -> None:
        """Drop any pending check."""
        self._debouncer.cancel()

    def _alert(self, message: str) -> None:
        self.last_alert = message
        if self._on_alert is not None:
            self._on_alert(message)
