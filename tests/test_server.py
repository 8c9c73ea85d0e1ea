"""
Tests for building the service from settings.
"""

import importlib

import uvicorn
from fastapi import FastAPI
from fastapi.testclient import TestClient

import soulsync.config
import soulsync.server


class TestServerStartup:
    """Test suite for the module-level app and the main entry point."""

    def setup_method(self):
        self.dotenv_calls = []

    def fake_load_dotenv(self, *args, **kwargs):
        self.dotenv_calls.append(args)
        return False

    def test_import_does_not_load_dotenv(self, monkeypatch):
        monkeypatch.setattr(soulsync.config, "load_dotenv", self.fake_load_dotenv)

        module = importlib.reload(soulsync.server)

        assert isinstance(module.app, FastAPI)
        assert self.dotenv_calls == []

    def test_main_loads_dotenv_and_serves(self, monkeypatch):
        served = {}

        def fake_run(app, **kwargs):
            served["app"] = app
            served.update(kwargs)

        monkeypatch.setattr(soulsync.config, "load_dotenv", self.fake_load_dotenv)
        monkeypatch.setattr(uvicorn, "run", fake_run)
        monkeypatch.setenv("SOULSYNC_PORT", "9123")
        monkeypatch.delenv("SOULSYNC_LLM_API_KEY", raising=False)

        soulsync.server.main()

        assert len(self.dotenv_calls) == 1
        assert isinstance(served["app"], FastAPI)
        assert served["port"] == 9123

    def test_app_from_settings_respects_seeding(self):
        settings = soulsync.config.Settings(seed_providers=False, seed_posts=False)
        app = soulsync.server.create_app_from_settings(settings)

        with TestClient(app) as client:
            assert client.get("/therapists").json()["results"] == []
            assert client.get("/blog").json()["posts"] == []
