import logging

import pytest

from salvo.session import GameSession

# Keep DEBUG chatter out of the test output unless a test asks for it
logging.basicConfig(level=logging.WARNING)


class ScriptedRandom:
    """Random source that replays a fixed list of draws for ``randint``."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        if not self.draws:
            raise AssertionError("ScriptedRandom ran out of draws")
        value = self.draws.pop(0)
        assert a <= value <= b, f"scripted draw {value} outside [{a}, {b}]"
        return value


class ScriptedConsole:
    """Input/output collaborator pair fed from per-player scripts.

    ``lines`` maps a player number to the lines that player will type; the
    session's ``current`` decides which script the next prompt reads from.
    Running out of lines raises EOFError, like a closed stdin.
    """

    def __init__(self, lines: dict[int, list[str]]):
        self.lines = {k: list(v) for k, v in lines.items()}
        self.output: list[str] = []
        self.prompts: list[str] = []
        self.session: GameSession | None = None

    def readline(self, prompt: str) -> str:
        self.prompts.append(prompt)
        queue = self.lines.get(self.session.current, [])
        if not queue:
            raise EOFError
        return queue.pop(0)

    def write(self, msg: str) -> None:
        self.output.append(msg)


@pytest.fixture
def scripted_random():
    return ScriptedRandom


@pytest.fixture
def session_factory():
    """Factory returning a (session, console) pair wired to scripted I/O."""

    def _factory(lines=None, **kwargs):
        console = ScriptedConsole(lines or {})
        sess = GameSession(console.readline, console.write, **kwargs)
        console.session = sess
        return sess, console

    return _factory
