import pytest

from daniengine.canvas import Canvas, Color


class RecordingCanvas(Canvas):
    def __init__(self):
        self.calls = []

    def size(self):
        return (320, 180)

    def clear(self, color):
        self.calls.append(("clear", color))

    def fill_rect(self, x, y, w, h, color):
        self.calls.append(("fill_rect", x, y, w, h, color))

    def draw_circle(self, x, y, radius, color):
        self.calls.append(("draw_circle", x, y, radius, color))

    def draw_line(self, x1, y1, x2, y2, color):
        self.calls.append(("draw_line", x1, y1, x2, y2, color))

    def present(self):
        self.calls.append(("present",))


WHITE = Color(255, 255, 255, 255)


def test_canvas_is_abstract():
    with pytest.raises(TypeError):
        Canvas()


def test_color_unpacks_in_channel_order():
    r, g, b, a = Color(1, 2, 3, 4)
    assert (r, g, b, a) == (1, 2, 3, 4)
    assert Color(1, 2, 3, 4).a == 4


def test_fill_rect_f32_passes_whole_numbers_through():
    c = RecordingCanvas()
    c.fill_rect_f32(10.0, 20.0, 30.0, 40.0, WHITE)
    assert c.calls == [("fill_rect", 10, 20, 30, 40, WHITE)]


def test_fill_rect_f32_rounds_halves_away_from_zero():
    c = RecordingCanvas()
    c.fill_rect_f32(2.5, -2.5, 4.0, 4.0, WHITE)
    _, x, y, _, _, _ = c.calls[0]
    assert x == 3
    assert y == -3


def test_fill_rect_f32_size_at_least_one():
    c = RecordingCanvas()
    c.fill_rect_f32(0.0, 0.0, 0.2, -5.0, WHITE)
    assert c.calls == [("fill_rect", 0, 0, 1, 1, WHITE)]


def test_draw_circle_f32_radius_at_least_one():
    c = RecordingCanvas()
    c.draw_circle_f32(5.0, 6.0, 0.0, WHITE)
    assert c.calls == [("draw_circle", 5, 6, 1, WHITE)]


def test_draw_line_f32_rounds_endpoints():
    c = RecordingCanvas()
    c.draw_line_f32(1.0, 2.0, 7.0, 8.0, WHITE)
    assert c.calls == [("draw_line", 1, 2, 7, 8, WHITE)]
    assert all(isinstance(v, int) for v in c.calls[0][1:5])