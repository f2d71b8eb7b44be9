import cv2
import numpy as np

from sprite_spotter.models import ProcessingError, ProcessingStage
from sprite_spotter.utils import cv_utils, get_image_info, load_image, save_image
from tests.synthetic import write_png


def test_load_returns_rgba_channel_order(tmp_path):
    image = np.zeros((2, 3, 4), dtype=np.uint8)
    image[0, 0] = (255, 10, 20, 128)
    path = write_png(image, tmp_path / "in.png")

    loaded = load_image(path)

    assert not isinstance(loaded, ProcessingError)
    assert loaded.shape == (2, 3, 4)
    assert loaded[0, 0].tolist() == [255, 10, 20, 128]


def test_load_grayscale_gets_opaque_alpha(tmp_path):
    path = tmp_path / "gray.png"
    cv2.imwrite(str(path), np.full((4, 5), 77, dtype=np.uint8))

    loaded = load_image(path)

    assert loaded.shape == (4, 5, 4)
    assert loaded[2, 3].tolist() == [77, 77, 77, 255]


def test_load_sixteen_bit_keeps_high_byte(tmp_path):
    path = tmp_path / "deep.png"
    bgra = np.zeros((2, 2, 4), dtype=np.uint16)
    bgra[..., 2] = 0xAB12
    bgra[..., 3] = 0xFFFF
    cv2.imwrite(str(path), bgra)

    loaded = load_image(path)

    assert loaded.dtype == np.uint8
    assert loaded[0, 0].tolist() == [0xAB, 0, 0, 0xFF]


def test_missing_file_is_unreadable(tmp_path):
    result = load_image(tmp_path / "missing.png")

    assert isinstance(result, ProcessingError)
    assert result.error_type == "input_unreadable"
    assert result.stage == ProcessingStage.INPUT
    assert not result.recoverable


def test_garbage_bytes_fail_to_decode(tmp_path):
    path = tmp_path / "bad.png"
    path.write_bytes(b"definitely not a png")

    result = load_image(path)

    assert isinstance(result, ProcessingError)
    assert result.error_type == "decode_failure"


def test_empty_file_fails_to_decode(tmp_path):
    path = tmp_path / "empty.png"
    path.write_bytes(b"")

    result = load_image(path)

    assert isinstance(result, ProcessingError)
    assert result.error_type == "decode_failure"


def test_save_round_trips_pixels(tmp_path):
    image = np.arange(2 * 3 * 4, dtype=np.uint8).reshape(2, 3, 4) * 10
    out = save_image(image, tmp_path / "nested" / "out.png")

    assert out == tmp_path / "nested" / "out.png"
    assert np.array_equal(load_image(out), image)


def test_non_rgba_image_is_rejected_before_writing(tmp_path):
    target = tmp_path / "out.png"
    result = save_image(np.full((2, 2, 3), 90, dtype=np.uint8), target)

    assert isinstance(result, ProcessingError)
    assert result.error_type == "encode_failure"
    assert result.stage == ProcessingStage.ENCODE
    assert result.details["shape"] == [2, 2, 3]
    assert list(tmp_path.iterdir()) == []


def test_wrong_sample_type_is_rejected(tmp_path):
    target = tmp_path / "out.png"
    result = save_image(np.zeros((2, 2, 4), dtype=np.uint16), target)

    assert isinstance(result, ProcessingError)
    assert result.error_type == "encode_failure"
    assert not target.exists()


def test_failed_write_leaves_no_partial_file(tmp_path, monkeypatch):
    def fail_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(cv_utils.os, "replace", fail_replace)
    target = tmp_path / "out.png"

    result = save_image(np.zeros((2, 2, 4), dtype=np.uint8), target)

    assert isinstance(result, ProcessingError)
    assert result.error_type == "encode_failure"
    assert "disk full" in result.message
    assert list(tmp_path.iterdir()) == []


def test_save_replaces_existing_output(tmp_path):
    target = tmp_path / "out.png"
    target.write_bytes(b"stale")

    assert save_image(np.full((1, 1, 4), 9, dtype=np.uint8), target) == target
    assert load_image(target).tolist() == [[[9, 9, 9, 9]]]
    assert [p.name for p in tmp_path.iterdir()] == ["out.png"]


def test_unwritable_path_is_encode_failure(tmp_path):
    blocker = tmp_path / "file.txt"
    blocker.write_text("x")

    result = save_image(np.zeros((2, 2, 4), dtype=np.uint8), blocker / "out.png")

    assert isinstance(result, ProcessingError)
    assert result.error_type == "encode_failure"


def test_image_info():
    info = get_image_info(np.zeros((7, 9, 4), dtype=np.uint8))
    assert (info.width, info.height, info.channels, info.has_alpha) == (9, 7, 4, True)
