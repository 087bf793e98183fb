import pytest

from asciiviz.visualizer import AudioDataStyle, Canvas, Color
from asciiviz.waveform import VisualizerWaveform

BLOCK = bytes([219]).decode("cp437")


def _make(width=40, height=30):
    return VisualizerWaveform(Canvas(width, height))


def _drawn_columns(viz):
    return sorted(
        {
            x
            for y in range(viz.height())
            for x in range(viz.width())
            if viz.canvas.color_at(x, y) is not None
        }
    )


def test_style_and_size():
    viz = _make()
    assert viz.audio_data_style is AudioDataStyle.WAVEFORM
    assert viz.audio_data_size == 40
    assert viz.starting_width == 40


def test_silence_still_draws_centre_line():
    viz = _make()
    assert viz.update(0.016, [0.0] * 40, True) is True
    middle = viz.height() // 2
    for x in range(viz.width()):
        assert viz.canvas.char_at(x, middle) == BLOCK
        assert viz.canvas.color_at(x, middle) is Color.LIGHTBLUE
        assert viz.canvas.color_at(x, middle + 1) is Color.BLUE


def test_upper_half_mirrors_lower_half():
    viz = _make()
    viz.update(0.016, [0.8] * 40, True)
    middle = viz.height() // 2
    up = [y for y in range(middle + 1) if viz.canvas.color_at(0, y) is Color.LIGHTBLUE]
    down = [y for y in range(middle + 1, viz.height()) if viz.canvas.color_at(0, y) is Color.BLUE]
    assert len(up) == len(down) + 1


def test_louder_samples_are_taller():
    viz = _make()
    viz.update(0.016, [0.1] * 20 + [1.0] * 20, True)

    def height_of(x):
        return sum(1 for y in range(viz.height()) if viz.canvas.color_at(x, y) is not None)

    assert height_of(30) > height_of(5)


def test_wider_window_centres_bars():
    viz = _make()
    viz.on_resize(60, 30)
    viz.update(0.016, [0.0] * 40, True)
    columns = _drawn_columns(viz)
    assert len(columns) == 40
    assert columns == list(range(columns[0], columns[-1] + 1))
    assert columns[0] == viz.width() - 1 - columns[-1]


def test_narrower_window_truncates():
    viz = _make()
    viz.on_resize(25, 30)
    viz.update(0.016, [0.0] * 40, True)
    assert _drawn_columns(viz) == list(range(25))


def test_short_data_is_rejected():
    viz = _make()
    with pytest.raises(IndexError):
        viz.update(0.016, [0.0] * 39, True)