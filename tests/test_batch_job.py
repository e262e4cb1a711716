import json
import cv2
import numpy as np

from planform.batch_job import main, save_images


def test_batch_job_writes_square_set(tmp_path, capsys):
    cfg = tmp_path / "params.json"
    cfg.write_text(json.dumps({"image_size_px": 24, "cycles_per_image": 3}))
    out_dir = tmp_path / "out"

    rc = main(["--out-dir", str(out_dir), "--config-file", str(cfg), "--prefix", "sq"])
    assert rc == 0
    names = sorted(p.name for p in out_dir.iterdir())
    assert names == sorted(f"sq_{k}.png" for k in ["C1", "C2", "C3", "C4", "P12", "P34", "P1234"])

    img = cv2.imread(str(out_dir / "sq_P1234.png"), cv2.IMREAD_GRAYSCALE)
    assert img.shape == (24, 24)
    assert img.dtype == np.uint8
    assert "[batch_job]" in capsys.readouterr().out


def test_batch_job_overrides(tmp_path):
    out_dir = tmp_path / "hex"
    cfg = tmp_path / "params.json"
    cfg.write_text(json.dumps({"image_size_px": 12}))
    main(["--out-dir", str(out_dir), "--config-file", str(cfg), "--component-count", "6", "--phase-offset", "3.14159"])
    assert (out_dir / "planform_P123456.png").exists()
    assert len(list(out_dir.glob("*.png"))) == 10


def test_save_images_scales_to_uint8(tmp_path):
    images = {"flat": np.full((4, 4), 10.0)}
    [p] = save_images(tmp_path, images, gray_scale=10.0, prefix="t")
    img = cv2.imread(str(p), cv2.IMREAD_GRAYSCALE)
    assert int(img.min()) == 255
    assert int(img.max()) == 255
