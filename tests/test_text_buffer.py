from conftest import RecordingSurface
from fountain.shapes import create_glyph
from fountain.text_buffer import TextBufferCache, TextMetrics
from fountain.vector_math import Vector2


def test_measure_uses_surface_metrics():
    s = RecordingSurface()
    cache = TextBufferCache(s)
    assert cache.measure("AB", 20, "Arial") == TextMetrics(20, 20)
    assert s.calls == [("measure_text", "AB", 20, "Arial")]


def test_render_to_buffer_sized_to_measurement():
    s = RecordingSurface()
    cache = TextBufferCache(s)
    buf = cache.render_to_buffer("A", 24, "Arial", (10, 20, 30))
    assert (buf.width, buf.height) == (12, 24)
    assert buf.text == "A"
    # Vertical middle of the text at half the buffer height
    assert s.calls[-1] == ("render_text", "A", 24, "Arial", (10, 20, 30), 12.0)


def test_glyph_buffer_created_once_and_reused():
    s = RecordingSurface()
    cache = TextBufferCache(s)
    glyph = create_glyph(cache, text="A", size=24)
    assert cache.get_stats() == {"measure_calls": 1, "buffers_created": 1}

    for i in range(50):
        glyph.draw(s, Vector2(i, i))

    assert cache.get_stats() == {"measure_calls": 1, "buffers_created": 1}
    assert s.names().count("measure_text") == 1
    assert s.names().count("create_offscreen_buffer") == 1
    blits = [c for c in s.calls if c[0] == "draw_image_at"]
    assert len(blits) == 50
    assert all(c[1] is glyph.buffer for c in blits)


def test_each_glyph_owns_its_buffer():
    s = RecordingSurface()
    cache = TextBufferCache(s)
    a = create_glyph(cache, text="A", size=24)
    b = create_glyph(cache, text="A", size=24)
    assert a.buffer is not b.buffer
    assert cache.get_stats()["buffers_created"] == 2
