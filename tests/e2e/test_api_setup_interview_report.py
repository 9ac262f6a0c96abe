from fastapi.testclient import TestClient

import api.routes as routes
import interviewer.interviewer as iv_mod
from api_server import app
from config import LlmRoute


client = TestClient(app)


def _route() -> LlmRoute:
    return LlmRoute(name="e2e", base_url="http://example.com", endpoint="/llm", model="m", timeout_s=1.0)


def test_full_flow_through_llm_gateway(monkeypatch, sample_report):
    gateway = iv_mod.LlmSessionGateway(opening_route=_route(), reply_route=_route(), report_route=_route())
    monkeypatch.setattr(routes, "default_gateway", lambda: gateway)
    tasks = []

    def fake_call(task, schema, *, cfg):
        tasks.append(task)
        if schema is iv_mod.OpeningMessage:
            return iv_mod.OpeningMessage(text="")
        return schema.model_validate_json(sample_report.model_dump_json())

    monkeypatch.setattr(iv_mod, "call", fake_call)
    monkeypatch.setattr(iv_mod, "chat", lambda messages, schema, *, cfg: iv_mod.InterviewerTurn(text="Go deeper."))

    assert client.get("/healthz").json() == {"status": "ok"}
    session_id = client.post("/api/screening/sessions").json()["session_id"]

    started = client.post(
        f"/api/screening/sessions/{session_id}/setup",
        json={"role": "Data Engineer", "level": "Mid-Level", "topics": ["Spark"]},
    ).json()
    assert started["state"] == "INTERVIEW"
    assert started["initial_message"] == "Hello! I'm ready to interview you."

    conversation = [
        {"role": "model", "text": started["initial_message"], "timestamp": 1},
        {"role": "user", "text": "I tuned Spark shuffles.", "timestamp": 2},
    ]
    reply = client.post(f"/api/screening/sessions/{session_id}/reply", json={"messages": conversation}).json()
    conversation.append({**reply["message"], "timestamp": 3})

    finished = client.post(f"/api/screening/sessions/{session_id}/end", json={"messages": conversation})
    assert finished.status_code == 200
    body = finished.json()
    assert body["state"] == "REPORT"
    assert body["report"]["summary"] == sample_report.summary
    assert "MODEL: Hello! I'm ready to interview you.\nUSER: I tuned Spark shuffles.\nMODEL: Go deeper." in tasks[-1]
