"""
WordLevel Web API — Flask backend for the editor page.

Provides REST endpoints for:
- /api/wordlists — Levels for the selector
- /api/wordlist — Load a level (or word list file) into a session
- /api/check — Check text against the session's word list
- /api/session/<id> — Discard a session

Every client works in its own CheckerSession, keyed by session_id.
Sessions are capped at settings.max_sessions (least recently used closed
first) and closed after settings.session_idle_seconds without a request.
Debouncing keystrokes is the page's job; /api/check validates at once.
"""

import asyncio
import threading
import time
from collections import OrderedDict
from typing import Optional

from flask import Flask, jsonify, request
from flask_cors import CORS

from wordlevel.core.config import Settings, load_settings
from wordlevel.core.logging import LogChannel, bind_request_context, clear_request_context, get_logger
from wordlevel.core.session import CheckerSession
from wordlevel.nlp.backends import get_tagger
from wordlevel.nlp.interfaces import Tagger
from wordlevel.render.highlight import render_html, to_dict, word_count_label
from wordlevel.validation.document import ValidationResult
from wordlevel.vocab.loader import is_inside

app = Flask(__name__)
CORS(app)

log = get_logger(LogChannel.WEB)

_state: dict = {"settings": None, "tagger": None}
# session_id -> (session, last request time), least recently used first
_sessions: "OrderedDict[str, tuple[CheckerSession, float]]" = OrderedDict()
_sessions_lock = threading.Lock()
_clock = time.monotonic


def configure_app(settings: Optional[Settings] = None, tagger: Optional[Tagger] = None) -> Flask:
    """Set the settings and tagger new sessions use; drops existing sessions."""
    _state["settings"] = settings
    _state["tagger"] = tagger
    with _sessions_lock:
        for session, _ in _sessions.values():
            session.close()
        _sessions.clear()
    return app


def get_settings() -> Settings:
    if _state["settings"] is None:
        _state["settings"] = load_settings()
    return _state["settings"]


def get_shared_tagger() -> Tagger:
    """Get or create the tagger shared by all sessions."""
    if _state["tagger"] is None:
        settings = get_settings()
        kwargs = {"model_name": settings.spacy_model} if settings.tagger == "spacy" else {}
        _state["tagger"] = get_tagger(settings.tagger, **kwargs)
    return _state["tagger"]


def _evict_sessions(now: float, settings: Settings) -> list[CheckerSession]:
    # caller holds the lock
    evicted = []
    while _sessions:
        session_id, (session, last_seen) = next(iter(_sessions.items()))
        idle = now - last_seen >= settings.session_idle_seconds
        if not idle and len(_sessions) < settings.max_sessions:
            break
        del _sessions[session_id]
        evicted.append(session)
    return evicted


def get_session(session_id: Optional[str]) -> tuple[CheckerSession, bool]:
    """Return the session for this id, creating it if needed."""
    settings = get_settings()
    now = _clock()
    created = False
    with _sessions_lock:
        entry = _sessions.pop(session_id, None) if session_id else None
        evicted = _evict_sessions(now, settings)
        if entry is not None and now - entry[1] < settings.session_idle_seconds:
            session = entry[0]
        else:
            if entry is not None:
                evicted.append(entry[0])
            session = CheckerSession(get_shared_tagger(), settings, session_id=session_id or None)
            created = True
        _sessions[session.session_id] = (session, now)

    for old in evicted:
        old.close()
        log.verbose("session_evicted", evicted_session=old.session_id)

    bind_request_context(session_id=session.session_id)
    if created:
        log.verbose("session_created")
    return session, created


def _payload() -> dict:
    return request.get_json(silent=True) or {}


def _result_payload(session: CheckerSession, result: Optional[ValidationResult] = None) -> dict:
    if result is None:
        result = session.last_result
    body = {
        "session_id": session.session_id,
        "wordlist": session.store.source,
        "busy": session.busy,
    }
    if result is not None:
        body.update(to_dict(result))
        body["html"] = str(render_html(result))
        body["word_count_label"] = word_count_label(result)
    return body


def _allowed_file(file: str, settings: Settings) -> bool:
    """Configured level files, or relative files inside the word list directory."""
    if any(level.file == file for level in settings.wordlists):
        return True
    return is_inside(file, settings.wordlist_base)


# =============================================================================
# API Routes
# =============================================================================

@app.teardown_request
def _clear_log_context(exc=None):
    clear_request_context()


@app.route('/api/wordlists', methods=['GET'])
def list_wordlists():
    """Levels available for selection."""
    return jsonify([level.model_dump() for level in get_settings().wordlists])


@app.route('/api/wordlist', methods=['POST'])
def select_wordlist():
    """Load a level or word list file into a session."""
    data = _payload()
    level_name = data.get('level')
    file = data.get('file')

    if not level_name and not file:
        return jsonify({'error': 'Provide a level or a file'}), 400

    if not level_name and (not isinstance(file, str) or not _allowed_file(file, get_settings())):
        log.warning("wordlist_file_rejected")
        return jsonify({'error': 'file must be a word list inside the word list directory'}), 400

    session, _ = get_session(data.get('session_id'))

    try:
        if level_name:
            loaded = asyncio.run(session.select_level(level_name))
        else:
            loaded = asyncio.run(session.load_wordlist(file))
    except KeyError as e:
        return jsonify({'error': e.args[0], 'session_id': session.session_id}), 404

    body = _result_payload(session)
    body['loaded'] = loaded
    body['entries'] = len(session.store)
    if not loaded:
        body['alert'] = session.last_alert
        return jsonify(body), 502
    return jsonify(body)


@app.route('/api/check', methods=['POST'])
def check_text():
    """Check text against the session's word list."""
    data = _payload()
    text = data.get('text', '')
    if not isinstance(text, str):
        return jsonify({'error': 'text must be a string'}), 400

    session, created = get_session(data.get('session_id'))
    if created:
        asyncio.run(session.start())

    if session.busy:
        return jsonify({'error': 'Word list is loading', 'session_id': session.session_id}), 409

    result = session.check(text)
    body = _result_payload(session, result)
    if created and session.last_alert:
        body['alert'] = session.last_alert
    return jsonify(body)


@app.route('/api/session/<session_id>', methods=['DELETE'])
def close_session(session_id):
    """Discard a session."""
    with _sessions_lock:
        entry = _sessions.pop(session_id, None)
    if entry is None:
        return jsonify({'error': 'Not found'}), 404
    entry[0].close()
    return jsonify({'closed': True})


def main() -> None:
    print("WordLevel API starting...")
    print("   Open: http://localhost:5060")
    app.run(debug=False, port=5060, use_reloader=False)


if __name__ == '__main__':
    main()
