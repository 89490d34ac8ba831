"""Tests for the JSend installer and its Flask integration."""
from __future__ import annotations

import json
from unittest.mock import Mock

import pytest
from flask import Flask, g

from flask_jsend import (
    InvalidDataKind,
    InvalidResponseTarget,
    JSendFormatter,
    JSendResponse,
    jsend_middleware,
    register_jsend_middleware,
)


def _build_app(config=None, **app_config):
    app = Flask(__name__)
    app.config["TESTING"] = True
    app.config.update(app_config)
    register_jsend_middleware(app, config)

    @app.route("/items/<int:item_id>")
    def get_item(item_id):
        return g.jsend.success({"id": item_id})

    @app.route("/items", methods=["POST"])
    def create_item():
        return g.jsend.fail({"name": "is required"}, 422)

    @app.route("/broken")
    def broken():
        return g.jsend.error(
            "DB down",
            503,
            {"code": "DB_ERR", "details": {"retryAfter": 60}, "extra": {"traceId": "abc123"}},
        )

    @app.route("/custom-label")
    def custom_label():
        return g.jsend.success(None, 200, "ok")

    @app.route("/invalid")
    def invalid():
        return g.jsend.success("not an object")

    return app


def test_install_attaches_formatter():
    install = jsend_middleware({"errorLabel": "exception"})
    target = Mock()

    formatter = install(target)

    assert isinstance(formatter, JSendFormatter)
    assert target.jsend is formatter
    formatter.error("x")
    target.send_json.assert_called_once_with({"status": "exception", "message": "x"})
    target.set_status.assert_called_once_with(500)


def test_install_creates_fresh_formatter_per_target():
    install = jsend_middleware()
    first, second = Mock(), Mock()

    assert install(first) is not install(second)
    assert install(first).config is install(second).config


def test_install_rejects_invalid_target():
    install = jsend_middleware()
    with pytest.raises(InvalidResponseTarget):
        install(object())


def test_success_route():
    client = _build_app().test_client()

    response = client.get("/items/3")

    assert response.status_code == 200
    assert response.mimetype == "application/json"
    assert response.json == {"status": "success", "data": {"id": 3}}


def test_fail_route():
    client = _build_app().test_client()

    response = client.post("/items")

    assert response.status_code == 422
    assert response.json == {"status": "fail", "data": {"name": "is required"}}


def test_error_route():
    client = _build_app().test_client()

    response = client.get("/broken")

    assert response.status_code == 503
    assert json.loads(response.data) == {
        "status": "error",
        "message": "DB down",
        "code": "DB_ERR",
        "details": {"retryAfter": 60},
        "extra": {"traceId": "abc123"},
    }


def test_configured_labels_apply_to_requests():
    app = _build_app({"successLabel": "ok", "errorLabel": "exception"})
    client = app.test_client()

    assert client.get("/items/1").json["status"] == "ok"
    assert client.get("/broken").json["status"] == "exception"
    assert client.post("/items").json["status"] == "fail"


def test_per_call_label_overrides_configuration():
    client = _build_app({"successLabel": "done"}).test_client()

    assert client.get("/custom-label").json == {"status": "ok", "data": None}


def test_app_config_labels_are_used():
    app = _build_app(JSEND_FAIL_LABEL="rejected")

    assert app.extensions["jsend"].fail_label == "rejected"
    assert app.test_client().post("/items").json["status"] == "rejected"


def test_invalid_data_propagates():
    app = _build_app()

    with app.test_request_context("/invalid"):
        app.preprocess_request()
        with pytest.raises(InvalidDataKind):
            app.dispatch_request()
        assert g.jsend.target.envelope is None


def test_before_request_binds_jsend_response():
    app = _build_app()

    with app.test_request_context("/items/1"):
        assert app.preprocess_request() is None
        assert isinstance(g.jsend, JSendFormatter)
        assert isinstance(g.jsend.target, JSendResponse)
        assert g.jsend.target.jsend is g.jsend


def test_jsend_response_without_app_context():
    response = JSendResponse()

    returned = response.set_status(201).send_json({"status": "success", "data": None})

    assert returned is response
    assert response.status_code == 201
    assert json.loads(response.get_data()) == {"status": "success", "data": None}
    assert response.envelope == {"status": "success", "data": None}


def test_error_body_keeps_envelope_key_order():
    client = _build_app().test_client()

    response = client.get("/broken")

    assert response.get_data(as_text=True) == (
        '{"status":"error","message":"DB down","code":"DB_ERR",'
        '"details":{"retryAfter":60},"extra":{"traceId":"abc123"}}'
    )


def test_success_body_starts_with_status():
    client = _build_app().test_client()

    response = client.get("/items/5")

    assert response.get_data(as_text=True) == '{"status":"success","data":{"id":5}}'
