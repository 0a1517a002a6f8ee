import cv2
import numpy as np

from vision_demos import run_green_screen

from conftest import solid, RED


def test_single_image(tmp_path, green_image, red_background):
    source = tmp_path / "source.png"
    background = tmp_path / "background.png"
    cv2.imwrite(str(source), green_image)
    cv2.imwrite(str(background), red_background)

    status = run_green_screen.main([
        "--input", str(source),
        "--background", str(background),
        "--hsv", "60", "255", "255",
        "--output-dir", str(tmp_path / "results"),
    ])

    assert status == 0
    assert (tmp_path / "results" / "composite.jpg").exists()


def test_frames_directory(tmp_path, green_image, red_background):
    frames = tmp_path / "frames"
    frames.mkdir()
    cv2.imwrite(str(frames / "a.png"), green_image)
    background = tmp_path / "background.png"
    cv2.imwrite(str(background), red_background)

    status = run_green_screen.main([
        "-i", str(frames), "-b", str(background),
        "--hsv", "60", "255", "255",
        "--output-dir", str(tmp_path / "results"),
    ])

    assert status == 0
    keyed = cv2.imread(str(tmp_path / "results" / "a_keyed.png"))
    np.testing.assert_array_equal(keyed, solid(100, 100, RED))
    assert (tmp_path / "results" / "green_screen_summary.csv").exists()


def test_frames_directory_show_closes_windows(monkeypatch, tmp_path, green_image, red_background):
    frames = tmp_path / "frames"
    frames.mkdir()
    cv2.imwrite(str(frames / "a.png"), green_image)
    cv2.imwrite(str(frames / "b.png"), green_image)
    background = tmp_path / "background.png"
    cv2.imwrite(str(background), red_background)

    calls = []
    monkeypatch.setattr(cv2, "imshow", lambda *args: calls.append("imshow"))
    monkeypatch.setattr(cv2, "waitKey", lambda *args: calls.append("waitKey") or -1)
    monkeypatch.setattr(cv2, "destroyAllWindows", lambda: calls.append("destroyAllWindows"))

    status = run_green_screen.main([
        "-i", str(frames), "-b", str(background),
        "--hsv", "60", "255", "255",
        "--output-dir", str(tmp_path / "results"),
        "--show",
    ])

    assert status == 0
    assert calls == ["imshow", "imshow", "waitKey", "destroyAllWindows"]
