import io

import pytest

from lifesim.core.exceptions import RenderError
from lifesim.core.field import Field, parse
from lifesim.core.simulation_engine import SimulationEngine
from lifesim.display.terminal import TerminalRenderer
from lifesim.utils.consts import CLEAR_SCREEN


class BrokenStream:
    def write(self, text):
        raise OSError("broken pipe")

    def flush(self):
        pass


def test_show_writes_header_and_field():
    stream = io.StringIO()
    engine = SimulationEngine(parse("X"))
    renderer = TerminalRenderer(engine, stream=stream, padding=1, clear_screen=False)

    renderer.show()

    assert stream.getvalue() == (
        "generation 0, population 1\n" "...\n.X.\n...\n" "\n"
    )
    assert renderer.frames_drawn == 1


def test_show_clears_screen_when_enabled():
    stream = io.StringIO()
    renderer = TerminalRenderer(SimulationEngine(parse("X")), stream=stream)

    renderer.show()

    assert stream.getvalue().startswith(CLEAR_SCREEN)


def test_show_empty_field():
    stream = io.StringIO()
    renderer = TerminalRenderer(SimulationEngine(Field()), stream=stream, clear_screen=False)

    renderer.show()

    assert "empty" in stream.getvalue()


def test_attached_renderer_draws_every_generation():
    stream = io.StringIO()
    engine = SimulationEngine(parse("...\nXXX\n..."))
    renderer = TerminalRenderer(engine, stream=stream, clear_screen=False)
    renderer.attach()

    engine.step(3)

    assert renderer.frames_drawn == 3
    assert "generation 3, population 3" in stream.getvalue()

    renderer.detach()
    engine.step()
    assert renderer.frames_drawn == 3


def test_broken_stream_raises_render_error():
    engine = SimulationEngine(parse("X"))
    renderer = TerminalRenderer(engine, stream=BrokenStream())

    with pytest.raises(RenderError) as excinfo:
        renderer.show()

    assert isinstance(excinfo.value.__cause__, OSError)
    assert renderer.frames_drawn == 0


def test_negative_padding_rejected():
    with pytest.raises(ValueError):
        TerminalRenderer(SimulationEngine(Field()), stream=io.StringIO(), padding=-1)


class BytesOnlyStream:
    def __init__(self):
        self.writes = 0

    def write(self, data):
        self.writes += 1
        raise TypeError("a bytes-like object is required, not 'str'")

    def flush(self):
        pass


def test_attached_renderer_failure_draws_once():
    stream = BytesOnlyStream()
    engine = SimulationEngine(parse("XX\nXX"))
    renderer = TerminalRenderer(engine, stream=stream, clear_screen=False)
    renderer.attach()

    with pytest.raises(TypeError):
        engine.step()

    assert stream.writes == 1
    assert renderer.frames_drawn == 0
