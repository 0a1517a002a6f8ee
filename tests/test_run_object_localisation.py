import cv2

from vision_demos import run_object_localisation


def test_missing_images_exit_code(monkeypatch, tmp_path, capsys):
    windows = []
    monkeypatch.setattr(cv2, "namedWindow", lambda *args: windows.append(args))

    status = run_object_localisation.main([
        "--img1", str(tmp_path / "Picture 2.jpg"),
        "--img2", str(tmp_path / "Picture 3.jpg"),
    ])

    assert status == -1
    assert windows == []
    assert "Could not open image/s." in capsys.readouterr().out


def test_one_missing_image(tmp_path, textured_image):
    img1 = tmp_path / "object.png"
    cv2.imwrite(str(img1), textured_image)

    status = run_object_localisation.main([
        "--img1", str(img1),
        "--img2", str(tmp_path / "missing.png"),
        "--no-display",
    ])

    assert status == -1


def test_writes_annotated_output(monkeypatch, tmp_path, textured_image, scene_image):
    img1 = tmp_path / "object.png"
    img2 = tmp_path / "scene.png"
    output = tmp_path / "Out 1.png"
    cv2.imwrite(str(img1), textured_image)
    cv2.imwrite(str(img2), scene_image)

    calls = []
    monkeypatch.setattr(cv2, "namedWindow", lambda *args: calls.append("namedWindow"))
    monkeypatch.setattr(cv2, "imshow", lambda *args: calls.append("imshow"))
    monkeypatch.setattr(cv2, "waitKey", lambda *args: calls.append("waitKey") or -1)
    monkeypatch.setattr(cv2, "destroyAllWindows", lambda: calls.append("destroyAllWindows"))

    status = run_object_localisation.main([
        "--img1", str(img1), "--img2", str(img2), "--output", str(output),
    ])

    assert status == 0
    assert calls == ["namedWindow", "imshow", "waitKey", "destroyAllWindows"]

    written = cv2.imread(str(output))
    assert written.shape == (240, 240 + 320, 3)
