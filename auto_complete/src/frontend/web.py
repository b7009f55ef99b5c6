from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response
from backend.engine import Engine
from backend.config import TOP_K
from backend.errors import AutocompleteError, DictionaryUnavailableError, EngineNotReadyError

log = logging.getLogger(__name__)

app = Flask(__name__)
_engine: Engine | None = None


def _require_engine() -> Engine:
    if _engine is None or _engine.index is None:
        raise EngineNotReadyError("no dictionary loaded")
    return _engine


# ---------- API ----------
@app.get("/api/complete")
def api_complete():
    q = request.args.get("q", "", type=str)
    k = request.args.get("k", TOP_K, type=int)
    if not q:
        return jsonify([])
    rows = _require_engine().complete(q, top_k=k)
    return jsonify(rows)


@app.get("/api/health")
def api_health():
    ready = _engine is not None and _engine.index is not None
    terms = len(_engine.index) if ready else 0  # type: ignore[union-attr, arg-type]
    return jsonify({"ok": ready, "terms": terms}), (200 if ready else 503)


@app.errorhandler(EngineNotReadyError)
def _not_ready(exc: EngineNotReadyError):
    return jsonify({"error": str(exc)}), 503


@app.errorhandler(AutocompleteError)
def _engine_error(exc: AutocompleteError):
    log.warning("Request failed: %r", exc)
    return jsonify({"error": str(exc)}), 400


# ---------- UI ----------
@app.get("/")
def home():
    # Single page, no external deps: input box + ranked list.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Autocomplete • Suggestions</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; --danger:#ff5d5d; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Arial; }
.container{ max-width:720px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0; }
.controls{ display:flex; gap:12px; align-items:center; margin:12px 0; }
.controls input{ padding:10px 12px; border-radius:10px; border:1px solid var(--border); background:#0b1117; color:var(--ink); font-size:16px; }
#q{ flex:1 } #k{ width:72px; text-align:center }
#q:focus{ border-color:var(--accent); outline:none }
ol{ margin:0; padding-left:28px } li{ padding:4px 0 }
.muted{ color:var(--muted) } .err{ color:var(--danger); display:none }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Autocomplete</h1>
      <div class="controls">
        <input id="q" type="text" placeholder="Type a word…" autocomplete="off" autofocus />
        <input id="k" type="number" min="1" max="100" value="10" title="Number of results" />
      </div>
      <div id="err" class="err"></div>
      <div id="out" class="muted">Start typing to see suggestions.</div>
    </div>
  </div>
<script>
const q = document.getElementById("q"), k = document.getElementById("k");
const out = document.getElementById("out"), err = document.getElementById("err");
let timer = null;
async function search(){
  const query = q.value;
  err.style.display = "none";
  if(!query){ out.className = "muted"; out.textContent = "Start typing to see suggestions."; return; }
  try{
    const resp = await fetch(`/api/complete?q=${encodeURIComponent(query)}&k=${k.value || 10}`);
    const data = await resp.json();
    if(!resp.ok){ throw new Error(data.error || resp.statusText); }
    if(!data.length){ out.className = "muted"; out.textContent = "(no suggestions)"; return; }
    const ol = document.createElement("ol");
    for(const word of data){ const li = document.createElement("li"); li.textContent = word; ol.appendChild(li); }
    out.className = ""; out.replaceChildren(ol);
  }catch(e){
    err.textContent = `error: ${e.message}`; err.style.display = "block";
  }
}
function debouncedSearch(){ clearTimeout(timer); timer = setTimeout(search, 150); }
q.addEventListener("input", debouncedSearch);
k.addEventListener("change", debouncedSearch);
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    mode = ap.add_mutually_exclusive_group(required=True)
    mode.add_argument("--build", action="store_true", help="Build the index from --dict word lists")
    mode.add_argument("--load", action="store_true", help="Load a cached index from --cache")
    ap.add_argument("--dict", dest="dictionaries", action="append", default=None,
                    help="Word list file or folder (repeatable; default: system word list)")
    ap.add_argument("--cache", default=None)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine()
    try:
        if args.build:
            _engine.build(args.dictionaries, cache=args.cache, verbose=args.verbose)
        else:
            if not args.cache:
                ap.error("--load requires --cache")
            _engine.load(cache=args.cache, verbose=args.verbose)
    except DictionaryUnavailableError as exc:
        log.error("Cannot start: %s", exc)
        return 1

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
