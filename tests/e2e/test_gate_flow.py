"""End-to-end tests for link gates."""

from inkwell.adapter.realtime import GateSessionStore
from inkwell.domain.repository import LinkRepository
from inkwell.domain.service import LinkService
from inkwell.domain.value import GatePhase
from tests.conftest import make_link
from tests.e2e.conftest import resolve, run


def seed_link(client, **fields):
    links = resolve(client, LinkRepository)
    return run(client, links.save, make_link(**fields))


def finish_countdown(client, gate_id):
    gate = resolve(client, GateSessionStore).get(gate_id).gate
    while gate.phase == GatePhase.TIMER:
        gate.tick()


class TestGateEndpoints:
    """Countdown, continue, password and close."""

    def test_missing_token_is_absent(self, client):
        response = client.post("/gates", json={})

        assert response.status_code == 200
        assert response.json()["phase"] == "absent"
        assert response.json()["gate_id"] is None

    def test_full_flow_counts_click(self, client):
        link = seed_link(client)

        opened = client.post("/gates", json={"token": "promo"}).json()
        assert opened["phase"] == "timer"
        assert opened["remaining"] == 15

        early = client.post(f"/gates/{opened['gate_id']}/continue")
        assert early.status_code == 409

        finish_countdown(client, opened["gate_id"])
        assert client.get(f"/gates/{opened['gate_id']}").json()["phase"] == "ready"

        done = client.post(f"/gates/{opened['gate_id']}/continue").json()
        assert done["phase"] == "access"
        assert done["target_url"] == "https://example.com/target"

        run(client, resolve(client, LinkService).drain)
        links = resolve(client, LinkRepository)
        assert run(client, links.find_by_id, link.id).clicks == 1

    def test_password_protected_link(self, client):
        seed_link(client, password="s3cret")
        gate_id = client.post("/gates", json={"token": "tok123"}).json()["gate_id"]
        finish_countdown(client, gate_id)

        prompt = client.post(f"/gates/{gate_id}/continue").json()
        wrong = client.post(f"/gates/{gate_id}/password", json={"password": "S3CRET"}).json()
        right = client.post(f"/gates/{gate_id}/password", json={"password": "s3cret"}).json()

        assert prompt["phase"] == "password"
        assert "password" not in prompt
        assert wrong["password_error"] is True
        assert wrong["target_url"] is None
        assert right["phase"] == "access"

    def test_close_gate(self, client):
        seed_link(client)
        gate_id = client.post("/gates", json={"token": "promo"}).json()["gate_id"]

        assert client.delete(f"/gates/{gate_id}").status_code == 204
        assert client.get(f"/gates/{gate_id}").status_code == 404
