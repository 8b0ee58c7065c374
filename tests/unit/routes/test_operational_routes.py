import pytest


@pytest.mark.unit
def test_seed_db_reports_success(client):
    resp = client.get('/seed_db')
    assert resp.status_code == 200
    assert resp.get_json() == {"message": "Database seeding successful."}


@pytest.mark.unit
def test_seed_db_failure_is_500(client, monkeypatch):
    import trackhub.interfaces.http.routes.seed as seed_routes

    def _fail():
        raise RuntimeError("disk full")

    monkeypatch.setattr(seed_routes, "seed_database", _fail)

    resp = client.get('/seed_db')
    assert resp.status_code == 500
    assert resp.get_json() == {"message": "Error seeding the data", "error": "disk full"}


@pytest.mark.unit
def test_reseeding_restores_deleted_tracks(seeded_client):
    seeded_client.post('/tracks/delete', json={"id": 1})
    seeded_client.get('/seed_db')

    resp = seeded_client.get('/tracks/details/1')
    assert resp.status_code == 200
    assert resp.get_json()["track"]["name"] == "Raabta"


@pytest.mark.unit
def test_healthz_reports_database_ok(client):
    resp = client.get('/healthz')
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok", "checks": {"database": "ok"}}


@pytest.mark.unit
def test_metrics_exposes_trackhub_counters(client):
    client.post('/tracks/new', json={"newTrack": {"name": "Counted"}})

    resp = client.get('/metrics')
    assert resp.status_code == 200
    assert b"trackhub_tracks_created_total" in resp.data


@pytest.mark.unit
def test_unknown_route_and_wrong_method_are_json(client):
    missing = client.get('/albums')
    assert missing.status_code == 404
    assert missing.get_json() == {"message": "Resource not found."}

    wrong = client.get('/tracks/new')
    assert wrong.status_code == 405
    assert wrong.get_json() == {"message": "Method not allowed."}


@pytest.mark.unit
def test_request_id_is_echoed_or_generated(client):
    echoed = client.get('/healthz', headers={"X-Request-ID": "req-123"})
    assert echoed.headers["X-Request-ID"] == "req-123"

    generated = client.get('/healthz')
    assert len(generated.headers["X-Request-ID"]) == 32
