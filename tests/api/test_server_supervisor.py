import asyncio

import pytest

import api.server as server


@pytest.fixture
def logged(monkeypatch):
    calls = []

    def fake_error(msg, *args, **kwargs):
        calls.append((msg % args, kwargs))

    monkeypatch.setattr(server.logger, "error", fake_error)
    return calls


def test_handler_logga_eccezione(logged):
    server.handle_loop_exception(None, {"message": "Task exception was never retrieved", "exception": RuntimeError("boom")})
    assert len(logged) == 1
    msg, kwargs = logged[0]
    assert "boom" in msg
    assert isinstance(kwargs["exc_info"], RuntimeError)


def test_handler_senza_eccezione(logged):
    server.handle_loop_exception(None, {"message": "callback fallita"})
    assert logged[0][0].endswith("callback fallita")


def test_loop_continua_dopo_errore_asincrono(logged):
    async def scenario():
        loop = asyncio.get_running_loop()
        loop.set_exception_handler(server.handle_loop_exception)

        def broken_callback():
            raise ValueError("callback rotta")

        loop.call_soon(broken_callback)
        await asyncio.sleep(0.01)
        # il loop è ancora vivo e serve altro lavoro
        return await asyncio.sleep(0, result="ancora attivo")

    assert asyncio.run(scenario()) == "ancora attivo"
    assert any("callback rotta" in msg for msg, _ in logged)


def test_serve_installa_handler(monkeypatch, make_settings):
    installed = {}

    class FakeServer:
        def __init__(self, config):
            self.config = config

        async def serve(self):
            installed["handler"] = asyncio.get_running_loop().get_exception_handler()
            installed["port"] = self.config.port

    monkeypatch.setattr(server.uvicorn, "Server", FakeServer)
    asyncio.run(server.serve(make_settings(port=4321)))
    assert installed["handler"] is server.handle_loop_exception
    assert installed["port"] == 4321
