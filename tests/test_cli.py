import io
import json
import sys

import pytest

from pyedid.__main__ import main


def _write(tmp_path, name, data):
    path = tmp_path / name
    path.write_bytes(data)
    return str(path)


class TestCli:

    def test_single_file(self, tmp_path, capsys, sam_edid):
        path = _write(tmp_path, "sam.bin", sam_edid)

        assert main([path]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["header"]["vendor"] == "SAM"
        assert output["descriptors"][2] == {"kind": "product_name", "text": "SyncMaster"}
        assert "unconsumed" not in output

    def test_multiple_files_with_checksums(self, tmp_path, capsys, sam_edid, dell_edid):
        sam = _write(tmp_path, "sam.bin", sam_edid)
        dell = _write(tmp_path, "dell.bin", dell_edid)

        assert main([sam, dell, "--verify-checksum"]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output[sam]["checksums"] == [True]
        assert output[dell]["checksums"] == [True, True]
        assert output[dell]["extensions"]["native_dtds"]["native_count"] == 1

    def test_summary(self, tmp_path, capsys, dell_edid):
        path = _write(tmp_path, "dell.bin", dell_edid)

        assert main([path, "--summary"]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["name"] == "DELL S2440L"
        assert "edid" not in output

    def test_stdin(self, monkeypatch, capsys, sam_edid):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(sam_edid)))

        assert main(["-"]) == 0
        assert json.loads(capsys.readouterr().out)["header"]["product"] == 596

    def test_trailing_bytes_reported(self, tmp_path, capsys, sam_edid):
        path = _write(tmp_path, "sam.bin", sam_edid + b"\x01")

        assert main([path]) == 0
        assert json.loads(capsys.readouterr().out)["unconsumed"] == 1

    def test_decode_error(self, tmp_path, capsys, caplog, sam_edid):
        path = _write(tmp_path, "bad.bin", sam_edid[:60])

        assert main([path]) == 1
        assert capsys.readouterr().out == ""
        assert "needed" in caplog.text
        assert "descriptor 0" in caplog.text

    def test_missing_file(self, tmp_path, caplog):
        assert main([str(tmp_path / "nope.bin")]) == 1
        assert "nope.bin" in caplog.text

    def test_sysfs(self, tmp_path, capsys, dell_edid):
        connector = tmp_path / "card0" / "card0-HDMI-A-1"
        connector.mkdir(parents=True)
        (connector / "edid").write_bytes(dell_edid)

        assert main(["--sysfs", "--drm-root", str(tmp_path), "--summary"]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["modules"][0]["connector"] == "card0-HDMI-A-1"
        assert "edid" not in output["modules"][0]

    def test_no_input(self):
        with pytest.raises(SystemExit):
            main([])
