import time
from typing import Optional

from flask import Flask, request, jsonify
from werkzeug.exceptions import BadRequest

from .config import Settings, load_settings
from .driver import is_prime
from .kernel import is_witness, to_int

def _param(name: str, required: bool = True) -> Optional[str]:
    """Read a parameter from the query string or a JSON/form body."""
    val = request.args.get(name)
    if val is None and request.method == "POST":
        data = request.get_json(silent=True) if request.is_json else request.form
        if data is not None and not isinstance(data, dict):
            raise BadRequest("JSON body must be an object")
        if data:
            val = data.get(name)
    if val is None or str(val).strip() == "":
        if required:
            raise BadRequest(f"missing {name}")
        return None
    return str(val)

def _int_param(name: str, required: bool = True) -> Optional[int]:
    raw = _param(name, required)
    if raw is None:
        return None
    try:
        return to_int(raw)
    except ValueError:
        raise BadRequest(f"{name} must be integer") from None

def create_app(settings: Optional[Settings] = None) -> Flask:
    if settings is None:
        settings = load_settings()
    app = Flask(__name__)

    def _check_size(name: str, v: int):
        if v < 0:
            raise BadRequest(f"{name} must be non-negative")
        if v.bit_length() > settings.max_bits:
            raise BadRequest(f"{name} exceeds {settings.max_bits} bits")

    @app.get("/healthz")
    def healthz():
        return jsonify(ok=True)

    # /api/is_prime?n=2147483647&k=16
    @app.route("/api/is_prime", methods=["GET", "POST"])
    def api_is_prime():
        n = _int_param("n")
        _check_size("n", n)
        k = _int_param("k", required=False)
        if k is None:
            k = settings.rounds
        if k < 0:
            raise BadRequest("k must be non-negative")
        if k > settings.max_rounds:
            raise BadRequest(f"k exceeds {settings.max_rounds}")
        t0 = time.perf_counter()
        res = is_prime(n, k, settings=settings)
        dt_ms = int((time.perf_counter() - t0) * 1000)
        return jsonify({"ok": True, "n": str(n), "k": k, "prime": res, "duration_ms": dt_ms})

    # /api/is_witness?a=2&n=27
    @app.route("/api/is_witness", methods=["GET", "POST"])
    def api_is_witness():
        a = _int_param("a")
        n = _int_param("n")
        _check_size("a", a)
        _check_size("n", n)
        res = is_witness(a, n)
        label = "invalid" if res is None else ("witness" if res else "non-witness")
        return jsonify({"ok": True, "a": str(a), "n": str(n), "result": label})

    return app

if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=8080)
