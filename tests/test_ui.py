from daniengine.canvas import Canvas, Color
from daniengine.input import ElementState, Input, MouseButton, MouseButtonEvent
from daniengine.math import Vec2
from daniengine.pixels import PixelCanvas
from daniengine.ui import (
    Rect,
    Ui,
    draw_text,
    draw_text_centered,
    glyph_rows,
    measure_text_px,
    panel,
)


class RecordingCanvas(Canvas):
    def __init__(self, width=320, height=180):
        self.width = width
        self.height = height
        self.rects = []

    def size(self):
        return (self.width, self.height)

    def clear(self, color):
        self.rects.clear()

    def fill_rect(self, x, y, w, h, color):
        self.rects.append((x, y, w, h, color))

    def draw_circle(self, x, y, radius, color):
        pass

    def draw_line(self, x1, y1, x2, y2, color):
        pass

    def present(self):
        pass


def _clicking_input(pos):
    inp = Input()
    inp.mouse_pos = pos
    inp.handle_event(MouseButtonEvent(MouseButton.LEFT, ElementState.PRESSED))
    inp.begin_frame()
    inp.handle_event(MouseButtonEvent(MouseButton.LEFT, ElementState.RELEASED))
    return inp


def test_rect_contains_is_inclusive():
    r = Rect(10.0, 10.0, 20.0, 5.0)
    assert r.contains(Vec2(10.0, 10.0))
    assert r.contains(Vec2(30.0, 15.0))
    assert not r.contains(Vec2(30.1, 12.0))
    assert not r.contains(Vec2(15.0, 9.9))


def test_glyph_rows_known_and_unknown():
    assert glyph_rows("A") == (0b010, 0b101, 0b111, 0b101, 0b101)
    assert glyph_rows(" ") == (0, 0, 0, 0, 0)
    assert glyph_rows("Z") == glyph_rows("0")
    assert glyph_rows("q") == glyph_rows("O")


def test_measure_text_scales_linearly():
    assert measure_text_px("A", 1.0) == 3.0
    assert measure_text_px("ABC", 2.0) == 2 * measure_text_px("ABC", 1.0)


def test_draw_text_high_bit_is_left():
    canvas = PixelCanvas(8, 8)
    white = Color(255, 255, 255, 255)
    draw_text(canvas, 0.0, 0.0, "1", white, 1.0)
    assert canvas.pixel(1, 0) == white
    assert canvas.pixel(0, 0) == Color(0, 0, 0, 0)
    assert canvas.pixel(0, 1) == white
    assert canvas.pixel(2, 1) == Color(0, 0, 0, 0)


def test_draw_text_advances_between_glyphs():
    canvas = PixelCanvas(16, 8)
    white = Color(255, 255, 255, 255)
    draw_text(canvas, 0.0, 0.0, "--", white, 1.0)
    assert all(canvas.pixel(x, 1) == white for x in (0, 1, 2, 4, 5, 6))
    assert canvas.pixel(3, 1) == Color(0, 0, 0, 0)


def test_draw_text_centered_stays_inside_rect():
    canvas = RecordingCanvas()
    r = Rect(10.0, 10.0, 110.0, 22.0)
    draw_text_centered(canvas, r, "FOUNTAIN: OFF", Color(0, 0, 0, 255))
    assert canvas.rects
    for x, y, w, h, _ in canvas.rects:
        assert r.x <= x and x + w <= r.x + r.w
        assert r.y <= y and y + h <= r.y + r.h


def test_draw_text_centered_empty_draws_nothing():
    canvas = RecordingCanvas()
    draw_text_centered(canvas, Rect(0, 0, 50, 20), "", Color(0, 0, 0, 255))
    assert canvas.rects == []


def test_panel_border_and_fill():
    canvas = PixelCanvas(20, 20)
    panel(canvas, Rect(2.0, 2.0, 10.0, 10.0))
    assert canvas.pixel(2, 2) == Color(80, 80, 80, 200)
    assert canvas.pixel(11, 11) == Color(80, 80, 80, 200)
    assert canvas.pixel(6, 6) == Color(0, 0, 0, 140)
    assert canvas.pixel(12, 12) == Color(0, 0, 0, 0)


def test_label_uppercases_text():
    lower, upper = RecordingCanvas(), RecordingCanvas()
    r = Rect(0.0, 0.0, 100.0, 18.0)
    Ui().label(lower, r, "controls")
    Ui().label(upper, r, "CONTROLS")
    assert lower.rects == upper.rects
    assert len(lower.rects) > 5


def test_button_click_when_released_over_it():
    ui = Ui()
    ui.begin()
    inp = _clicking_input(Vec2(15.0, 15.0))
    assert ui.button(inp, RecordingCanvas(), Rect(10, 10, 50, 20), "Go") is True
    assert ui.hot == 1


def test_button_not_clicked_when_elsewhere():
    ui = Ui()
    ui.begin()
    inp = _clicking_input(Vec2(200.0, 200.0))
    assert ui.button(inp, RecordingCanvas(), Rect(10, 10, 50, 20), "Go") is False
    assert ui.hot is None


def test_button_not_clicked_while_held():
    ui = Ui()
    ui.begin()
    inp = Input()
    inp.mouse_pos = Vec2(15.0, 15.0)
    inp.handle_event(MouseButtonEvent(MouseButton.LEFT, ElementState.PRESSED))
    canvas = PixelCanvas(80, 40)
    assert ui.button(inp, canvas, Rect(10, 10, 50, 20), "") is False
    assert canvas.pixel(9, 9) == Color(255, 100, 200, 255)
    assert canvas.pixel(11, 11) == Color(235, 235, 235, 210)


def test_begin_resets_ids_and_hot():
    ui = Ui()
    inp = Input()
    inp.mouse_pos = Vec2(15.0, 15.0)
    canvas = RecordingCanvas()
    ui.begin()
    ui.button(inp, canvas, Rect(100, 100, 10, 10), "A")
    ui.button(inp, canvas, Rect(10, 10, 10, 10), "B")
    assert ui.hot == 2
    ui.begin()
    assert ui.hot is None
    ui.button(inp, canvas, Rect(10, 10, 10, 10), "B")
    assert ui.hot == 1