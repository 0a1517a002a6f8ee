import cv2
import pytest

from vision_demos.core.visualizer import Visualizer

from conftest import solid, RED


def test_save_creates_output_dir(tmp_path):
    visualizer = Visualizer(tmp_path / "nested" / "out")

    path = visualizer.save("red.png", solid(20, 30, RED))

    assert cv2.imread(path).shape == (20, 30, 3)


def test_create_video(tmp_path):
    frames = []
    for i, size in enumerate([(40, 60), (40, 60), (20, 30)]):
        path = tmp_path / f"{i}.png"
        cv2.imwrite(str(path), solid(*size, RED))
        frames.append(path)

    video_path = Visualizer(tmp_path / "out").create_video(frames, "clip.mp4", fps=5)

    capture = cv2.VideoCapture(video_path)
    ok, frame = capture.read()
    capture.release()
    assert ok
    assert frame.shape[:2] == (40, 60)


def test_create_video_without_frames(tmp_path):
    with pytest.raises(ValueError):
        Visualizer(tmp_path).create_video([])


def test_wait_and_close(monkeypatch):
    calls = []
    monkeypatch.setattr(cv2, "waitKey", lambda delay: calls.append(delay) or 27)
    monkeypatch.setattr(cv2, "destroyAllWindows", lambda: calls.append("closed"))

    assert Visualizer.wait_and_close() == 27
    assert calls == [0, "closed"]
