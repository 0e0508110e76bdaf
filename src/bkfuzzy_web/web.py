from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response
from bkfuzzy.engine import Engine
from bkfuzzy import config as CFG
from bkfuzzy.errors import BkFuzzyError

app = Flask(__name__)
_engine: Engine | None = None
log = logging.getLogger(__name__)

def _not_ready():
    return jsonify({"error": "index not loaded"}), 503

def _bad_distance():
    return jsonify({"error": f"n must be an integer in 0..{CFG.MAX_WEB_DISTANCE}"}), 400

# ---------- API ----------
@app.get("/api/health")
def api_health():
    return jsonify({"ok": True, "ready": bool(_engine and _engine.ready)})

@app.get("/api/stats")
def api_stats():
    if not (_engine and _engine.ready):
        return _not_ready()
    return jsonify(_engine.stats())

@app.get("/api/query")
def api_query():
    q = request.args.get("q", "", type=str).strip()
    raw_n = request.args.get("n", str(CFG.DEFAULT_MAX_DISTANCE), type=str)
    mode = request.args.get("mode", CFG.STRATEGY_INDEX, type=str)
    if mode not in CFG.STRATEGIES:
        return jsonify({"error": f"mode must be one of {list(CFG.STRATEGIES)}"}), 400
    try:
        n = int(raw_n)
    except ValueError:
        return _bad_distance()
    if not (0 <= n <= CFG.MAX_WEB_DISTANCE):
        return _bad_distance()
    if not q:
        return jsonify({"query": "", "threshold": n, "mode": mode, "matches": [], "visited": 0})
    if not (_engine and _engine.ready):
        return _not_ready()
    res = _engine.query(q, n, strategy=mode)
    return jsonify(res.to_dict())

# ---------- UI ----------
@app.get("/")
def home():
    # single page, no external deps
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>bkfuzzy • fuzzy lookup</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,Segoe UI,Roboto,Arial; }
.container{ max-width:760px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0 }
.controls{ display:flex; gap:12px; align-items:center; flex-wrap:wrap }
.controls input[type=text]{ flex:1; min-width:220px; padding:10px 12px; border-radius:10px;
  border:1px solid var(--border); background:#0b1117; color:var(--ink); font-size:16px }
.controls input[type=number]{ width:64px; padding:8px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink) }
.meta{ color:var(--muted); font-size:13px; margin-top:8px }
ul{ list-style:none; padding:0; margin:12px 0 0 0; columns:3 }
li{ padding:2px 0; font-family:ui-monospace,Menlo,Consolas,monospace }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Fuzzy word lookup</h1>
      <form class="controls" onsubmit="return false">
        <input id="q" type="text" placeholder="Type a word…" autocomplete="off" autofocus />
        <label>n <input id="n" type="number" min="0" max="5" value="2" /></label>
        <label><input id="brute" type="checkbox" /> brute force</label>
      </form>
      <div id="stats" class="meta">Ready.</div>
      <ul id="out"></ul>
    </div>
  </div>
<script>
const $ = (s) => document.querySelector(s);
const q = $("#q"), n = $("#n"), brute = $("#brute"), out = $("#out"), stats = $("#stats");
let t;
async function run(){
  const word = q.value.trim();
  if(!word){ out.innerHTML = ""; stats.textContent = "Ready."; return; }
  const mode = brute.checked ? "brute" : "index";
  const resp = await fetch(`/api/query?q=${encodeURIComponent(word)}&n=${n.value}&mode=${mode}`);
  const data = await resp.json();
  if(!resp.ok){ stats.textContent = `Error: ${data.error}`; return; }
  stats.textContent = `${data.matches.length} matches • ${data.visited} compared (${data.mode})`;
  out.innerHTML = data.matches.map(w => `<li>${w.replace(/[&<>]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;"}[c]))}</li>`).join("");
}
function debounced(){ clearTimeout(t); t = setTimeout(run, 150); }
q.addEventListener("input", debounced);
n.addEventListener("change", debounced);
brute.addEventListener("change", debounced);
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of bkfuzzy.Engine")
    ap.add_argument("-w", "--wordfile", default=None)
    ap.add_argument("--host", default=CFG.WEB_HOST)
    ap.add_argument("--port", type=int, default=CFG.WEB_PORT)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine()
    try:
        _engine.build(args.wordfile or CFG.default_wordfile(), verbose=args.verbose)
    except BkFuzzyError as exc:
        log.error("%s", exc)
        return 1

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0
