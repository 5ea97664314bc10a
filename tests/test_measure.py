"""Tests for measurement hooks."""

import hashlib
import json

from grubscan.measure import DigestRecorder, log_measurement
from grubscan.models import MeasurementKind


class TestLogMeasurement:
    def test_logs_digest(self, caplog):
        caplog.set_level("DEBUG", logger="grubscan.measure")
        log_measurement(MeasurementKind.CONFIG_DATA, b"menuentry a\n", "/mnt/grub.cfg")
        assert hashlib.sha256(b"menuentry a\n").hexdigest() in caplog.text
        assert "configuration-data" in caplog.text


class TestDigestRecorder:
    def test_records_measurement(self):
        recorder = DigestRecorder()
        recorder(MeasurementKind.CONFIG_DATA, b"abc", "/mnt/grub.cfg")
        record = recorder.records[0]
        assert record["kind"] == "configuration-data"
        assert record["path"] == "/mnt/grub.cfg"
        assert record["sha256"] == hashlib.sha256(b"abc").hexdigest()
        assert record["size"] == 3

    def test_records_is_a_copy(self):
        recorder = DigestRecorder()
        recorder(MeasurementKind.CONFIG_DATA, b"abc", "/a")
        recorder.records.clear()
        assert len(recorder.records) == 1

    def test_export_json(self, tmp_path):
        recorder = DigestRecorder()
        recorder(MeasurementKind.CONFIG_DATA, b"a", "/a")
        recorder(MeasurementKind.CONFIG_DATA, b"b", "/b")
        out = tmp_path / "measurements.json"
        recorder.export_json(out)
        data = json.loads(out.read_text())
        assert data["count"] == 2
        assert [m["path"] for m in data["measurements"]] == ["/a", "/b"]
