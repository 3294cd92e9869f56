from rim.commands import (
    CommandQueue,
    NavigateNext,
    NavigatePrev,
    ResetZoom,
    ZoomIn,
    ZoomOut,
)
from rim.state import Gallery
from rim.viewer import Viewer


def make_viewer(images):
    v = Viewer(gallery=Gallery(images=images), probe=lambda p: (640, 480))
    v.load(images[0])
    v.set_viewport(640, 480)
    return v


def test_zoom_commands_apply_anchor():
    v = make_viewer(["a.png"])

    assert ZoomIn(anchor=(50, 40)).execute(v)
    assert v.state.position == (50, 40)
    assert v.state.pan_offset == (10 + 64, 8 + 48)

    assert ZoomOut().execute(v)
    assert v.state.zoom_level == 0


def test_reset_command_guard():
    v = make_viewer(["a.png"])

    assert not ResetZoom().can_execute(v)
    ZoomOut().execute(v)
    assert ResetZoom().execute(v)
    assert v.state.zoom_level == 0


def test_navigation_commands_need_two_images():
    single = make_viewer(["a.png"])
    assert not NavigateNext().execute(single)
    assert not NavigatePrev().execute(single)

    pair = make_viewer(["a.png", "b.png"])
    assert NavigateNext().execute(pair)
    assert pair.gallery.get() == "b.png"
    assert NavigatePrev().execute(pair)
    assert pair.gallery.get() == "a.png"


def test_zoom_commands_on_invalid_image():
    v = Viewer(gallery=Gallery(images=["x.png"]), probe=lambda p: (0, 0))
    v.load("x.png")

    assert not ZoomIn().can_execute(v)
    assert not ZoomOut().execute(v)


def test_queue_records_successful_commands():
    v = make_viewer(["a.png"])
    queue = CommandQueue(max_history=2)

    assert queue.execute(ZoomIn(), v)
    assert not queue.execute(NavigateNext(), v)
    assert queue.execute(ZoomIn(), v)
    assert queue.execute(ResetZoom(), v)

    history = queue.history
    assert [type(c).__name__ for c in history] == ["ZoomIn", "ResetZoom"]

    queue.clear_history()
    assert queue.history == []
