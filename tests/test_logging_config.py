import json
import logging

from attendance_tracker.logging_config import build_logging_config, setup_logging


def test_json_formatter_selected():
    config = build_logging_config("debug", json_format=True)

    assert config["handlers"]["console"]["formatter"] == "json"
    assert config["loggers"]["attendance_tracker"]["level"] == "DEBUG"


def test_json_records_are_parseable(capsys):
    setup_logging("INFO", json_format=True)

    logging.getLogger("attendance_tracker.tests").info("profile saved")

    line = capsys.readouterr().err.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["message"] == "profile saved"
    assert record["levelname"] == "INFO"
