"""Unit tests for linguist.config.settings module."""

import pytest

from .settings import MODELS, TTS_SAMPLE_RATE, get_model, get_model_config, list_models


class TestModels:
    """Tests for per-task model configuration."""

    def test_all_tasks_present(self):
        assert set(MODELS) == {"translate", "refine", "transcribe", "speech", "insights"}

    def test_each_task_has_model(self):
        for task, cfg in MODELS.items():
            assert cfg["model"], f"{task} has no model"
            assert "description" in cfg

    def test_get_model(self):
        assert get_model("translate") == MODELS["translate"]["model"]

    def test_speech_uses_tts_model(self):
        assert "tts" in get_model("speech")

    def test_unknown_task(self):
        with pytest.raises(KeyError, match="Unknown task"):
            get_model_config("dance")

    def test_list_models(self):
        models = list_models()
        assert models["refine"] == MODELS["refine"]["model"]
        assert len(models) == len(MODELS)


def test_tts_sample_rate():
    assert TTS_SAMPLE_RATE == 24000
