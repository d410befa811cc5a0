import json
import logging
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from multilang.main import load_request, main
from multilang.processor.exceptions import InvalidInputError, StageTimeoutError
from multilang.processor.models import (
    ExtractionResult,
    HealthState,
    HealthStatus,
    TranslationResult,
)


def _run(argv: list[str], processor: MagicMock) -> int:
    with patch("multilang.main.build_processor", return_value=processor), patch(
        "multilang.main.Log"
    ):
        return main(argv)


class TestLoadRequest:
    def test_guesses_mime_type_from_extension(self, tmp_path: Path) -> None:
        image = tmp_path / "page.png"
        image.write_bytes(b"png")
        request = load_request(image)
        assert request.mime_type == "image/png"
        assert request.size_bytes == 3
        assert request.file_name == "page.png"

    def test_explicit_mime_type_wins(self, tmp_path: Path) -> None:
        image = tmp_path / "scan.bin"
        image.write_bytes(b"jpg")
        assert load_request(image, "image/jpeg").mime_type == "image/jpeg"

    def test_unknown_extension_falls_back(self, tmp_path: Path) -> None:
        blob = tmp_path / "blob"
        blob.write_bytes(b"?")
        assert load_request(blob).mime_type == "application/octet-stream"


class TestMain:
    def test_extract_text_prints_json(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        image = tmp_path / "scan.jpg"
        image.write_bytes(b"jpg")
        processor = MagicMock()
        processor.extract_text = AsyncMock(
            return_value=ExtractionResult(text="Hola", detected_language="es", confidence=0.9)
        )
        assert _run(["extract-text", str(image)], processor) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["text"] == "Hola"
        assert output["detected_language"] == "es"
        assert processor.extract_text.call_args.args[0].mime_type == "image/jpeg"

    def test_translate_passes_language(self, capsys: pytest.CaptureFixture[str]) -> None:
        processor = MagicMock()
        processor.translate_to_english = AsyncMock(
            return_value=TranslationResult(
                original_text="Hello",
                detected_language="en",
                translated_text="Hello",
                confidence=1.0,
            )
        )
        assert _run(["translate", "Hello", "--language", "en"], processor) == 0
        processor.translate_to_english.assert_awaited_once_with("Hello", "en")
        assert json.loads(capsys.readouterr().out)["translated_text"] == "Hello"

    def test_health_prints_state_value(self, capsys: pytest.CaptureFixture[str]) -> None:
        processor = MagicMock()
        processor.health_check = AsyncMock(
            return_value=HealthStatus(
                overall=HealthState.DEGRADED,
                services={"extraction": True, "translation": False, "analysis": True},
            )
        )
        assert _run(["health"], processor) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["overall"] == "degraded"
        assert output["services"]["translation"] is False

    def test_invalid_input_exits_with_client_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        document = tmp_path / "doc.pdf"
        document.write_bytes(b"%PDF")
        processor = MagicMock()
        processor.process = AsyncMock(side_effect=InvalidInputError("Unsupported file type"))
        assert _run(["process", str(document)], processor) == 2
        assert json.loads(capsys.readouterr().out) == {
            "error": "invalid_input",
            "details": "Unsupported file type",
        }

    def test_timeout_exits_with_failure(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        image = tmp_path / "scan.png"
        image.write_bytes(b"png")
        processor = MagicMock()
        processor.analyze = AsyncMock(side_effect=StageTimeoutError("analysis", 45))
        assert _run(["analyze", str(image)], processor) == 1
        output = json.loads(capsys.readouterr().out)
        assert output["error"] == "timeout"
        assert output["details"] == "analysis stage timed out after 45s"

    def test_missing_file_exits_with_failure(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert _run(["process", str(tmp_path / "missing.png")], MagicMock()) == 1
        assert json.loads(capsys.readouterr().out)["error"] == "processing_error"


class TestMainOutputStreams:
    def test_stdout_is_json_while_logs_go_to_stderr(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("CAPABILITY_PROVIDER", "example")
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        logger = logging.getLogger("multilang")
        previous_level, previous_handlers = logger.level, list(logger.handlers)
        logger.handlers.clear()
        try:
            assert main(["translate", "Hello", "--language", "en"]) == 0
        finally:
            logger.handlers[:] = previous_handlers
            logger.setLevel(previous_level)
        captured = capsys.readouterr()
        assert json.loads(captured.out)["translated_text"] == "Hello"
        assert "translate 5 chars started" in captured.err
