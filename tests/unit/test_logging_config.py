"""
Tests for configure_logging - loguru sinks built from Settings.

Verifies:
- The JSON file sink is created from the Settings paths
- Pipeline records carry the step they were logged from
- Records logged outside the pipeline get the default step
"""

import json
import sys
from unittest.mock import MagicMock

import pytest
from loguru import logger

from shelfcheck.config import Settings
from shelfcheck.core.errors import MetadataServiceError
from shelfcheck.logging_config import DEFAULT_STEP, configure_logging, pipeline_logger
from shelfcheck.services.normalizer import TitleNormalizer


@pytest.fixture
def configured(test_settings: Settings):
    """Configure le logging sur tmp_path et restaure le handler par defaut ensuite."""
    configure_logging(test_settings)
    yield test_settings
    logger.remove()
    logger.configure(extra={})
    logger.add(sys.stderr)


def _read_records(settings: Settings) -> list[dict]:
    # remove() vide la file d'attente (enqueue=True) et ferme le fichier
    logger.remove()
    lines = settings.log_file.read_text(encoding="utf-8").splitlines()
    return [json.loads(line)["record"] for line in lines]


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_creates_log_directory(self, test_settings: Settings) -> None:
        settings = test_settings.model_copy(
            update={"log_file": test_settings.log_file.parent / "nested" / "shelfcheck.log"}
        )

        configure_logging(settings)
        logger.remove()
        logger.add(sys.stderr)

        assert settings.log_file.parent.is_dir()

    def test_pipeline_step_in_file_records(self, configured: Settings) -> None:
        pipeline_logger("search").info("Trouve: 'Inception'")

        records = _read_records(configured)

        found = [r for r in records if r["message"] == "Trouve: 'Inception'"]
        assert found[0]["extra"]["step"] == "search"
        assert found[0]["level"]["name"] == "INFO"

    def test_default_step_outside_pipeline(self, configured: Settings) -> None:
        logger.info("Démarrage de ShelfCheck")

        records = _read_records(configured)

        started = [r for r in records if r["message"] == "Démarrage de ShelfCheck"]
        assert started[0]["extra"]["step"] == DEFAULT_STEP

    @pytest.mark.asyncio
    async def test_soft_failure_logged_by_normalize_step(
        self, configured: Settings, mock_metadata_client: MagicMock
    ) -> None:
        mock_metadata_client.search.side_effect = MetadataServiceError("TMDB down")
        normalizer = TitleNormalizer(client=mock_metadata_client, language="en-US")

        await normalizer.normalize("Inception")

        records = _read_records(configured)
        warnings = [r for r in records if r["level"]["name"] == "WARNING"]
        assert warnings
        assert warnings[0]["extra"]["step"] == "normalize"
        assert "TMDB down" in warnings[0]["message"]
