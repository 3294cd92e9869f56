from rim.app import Application, initial_window_size, main, resolve_start_path
from rim.logging import get_event
from rim.commands import NavigateNext, NavigatePrev, ZoomIn


def test_initial_window_size():
    assert initial_window_size((0, 0)) == (320, 240)
    assert initial_window_size((2000, 100)) == (1280, 100)
    assert initial_window_size((10, 900)) == (32, 720)
    assert initial_window_size((640, 480)) == (640, 480)


def test_initialize_from_file(tmp_path, make_image):
    make_image(tmp_path / "one.png", (2000, 100))
    second = make_image(tmp_path / "two.png", (30, 40))
    loaded = []

    app = Application()
    assert app.initialize(second, on_set=loaded.append)

    assert loaded == [second]
    assert app.window_title == "two.png - 2/2 - (30 x 40) - Rim"
    assert app.window_size == (32, 40)


def test_initialize_without_images(tmp_path):
    app = Application()

    assert not app.initialize(str(tmp_path))
    assert app.window_title == "Rim"
    assert app.window_size == (320, 240)


def test_submit_updates_title(tmp_path, make_image):
    make_image(tmp_path / "img1.png", (10, 10))
    make_image(tmp_path / "img2.png", (20, 10))
    titles = []

    app = Application(on_title=titles.append)
    app.initialize(str(tmp_path))

    assert app.submit(NavigateNext())
    assert app.window_title == "img2.png - 2/2 - (20 x 10) - Rim"
    assert app.submit(NavigatePrev())
    assert titles == [
        "img2.png - 2/2 - (20 x 10) - Rim",
        "img1.png - 1/2 - (10 x 10) - Rim",
    ]
    assert app.submit(ZoomIn(anchor=(0, 0)))
    assert len(app.queue.history) == 3


def test_unreadable_image_still_titled(tmp_path):
    bad = tmp_path / "bad.png"
    bad.write_bytes(b"not an image")

    app = Application()
    assert app.initialize(str(bad))

    assert app.window_title == "bad.png - 1/1 - Rim"
    assert not app.submit(ZoomIn())


def test_main_lists_gallery(tmp_path, make_image, capsys):
    make_image(tmp_path / "a10.png")
    make_image(tmp_path / "a2.png")

    assert main(["--quiet", str(tmp_path / "a10.png")]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out[0] == "a10.png - 2/2 - (8 x 6) - Rim"
    assert out[1] == "32x32"
    assert out[2].endswith("a2.png")
    assert out[3].startswith(">")


def test_main_empty_dir(tmp_path, capsys):
    assert main(["-q", str(tmp_path)]) == 1
    assert "no images" in capsys.readouterr().out


def test_submit_counts_events(tmp_path, make_image):
    make_image(tmp_path / "a.png")
    app = Application()
    app.initialize(str(tmp_path))
    before = get_event()

    app.submit(ZoomIn())
    app.submit(NavigateNext())

    assert get_event() == before + 2


def test_initialize_accepts_title_callback(tmp_path, make_image):
    make_image(tmp_path / "a.png")
    make_image(tmp_path / "b.png")
    titles = []

    app = Application()
    app.initialize(str(tmp_path), on_title=titles.append)
    app.submit(NavigateNext())

    assert titles == ["b.png - 2/2 - (8 x 6) - Rim"]


def test_missing_start_file_browses_its_directory(tmp_path, make_image, monkeypatch, capsys):
    make_image(tmp_path / "photos" / "a.png")
    make_image(tmp_path / "photos" / "b.png")
    make_image(tmp_path / "other" / "z.png")
    monkeypatch.chdir(tmp_path / "other")

    assert main(["-q", str(tmp_path / "photos" / "deleted.png")]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out[0] == "a.png - 1/2 - (8 x 6) - Rim"
    assert out[2].startswith(">") and out[2].endswith("a.png")
    assert out[3].endswith("b.png")


def test_resolve_start_path(tmp_path):
    assert resolve_start_path(None) is None
    assert resolve_start_path("") is None
    missing = tmp_path / "gone.png"
    assert resolve_start_path(str(missing)) == str(missing)
