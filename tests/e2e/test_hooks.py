"""End-to-end tests for the backend change webhook."""

from inkwell.domain.repository import SiteSettingsRepository
from inkwell.domain.service import SiteSettingsCell
from tests.e2e.conftest import resolve, run

SECRET_HEADER = "X-Inkwell-Webhook-Secret"
DEFAULT_SECRET = "CHANGE_ME_IN_PRODUCTION"


class TestChangeWebhook:
    def test_wrong_secret_rejected(self, client):
        response = client.post(
            "/hooks/changes",
            json={"type": "INSERT", "table": "comments", "record": {}},
            headers={SECRET_HEADER: "wrong"},
        )

        assert response.status_code == 401

    def test_missing_secret_rejected(self, client):
        response = client.post(
            "/hooks/changes", json={"type": "INSERT", "table": "comments", "record": {}}
        )

        assert response.status_code == 401

    def test_site_settings_change_reloads_settings(self, client):
        assert client.get("/site/settings").json()["site_title"] == "Inkwell"
        cell = resolve(client, SiteSettingsCell)
        repo = resolve(client, SiteSettingsRepository)
        current = run(client, cell.get)
        run(client, repo.save, current.model_copy(update={"site_title": "Renamed"}))

        # Still cached until the backend reports the change
        assert client.get("/site/settings").json()["site_title"] == "Inkwell"

        response = client.post(
            "/hooks/changes",
            json={"type": "UPDATE", "table": "site_settings", "record": {"site_title": "Renamed"}},
            headers={SECRET_HEADER: DEFAULT_SECRET},
        )

        assert response.status_code == 200
        assert response.json()["delivered"] == 0
        assert client.get("/site/settings").json()["site_title"] == "Renamed"
