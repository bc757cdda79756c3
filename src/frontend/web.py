from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from anagrams.engine import Engine
from anagrams.config import MAX_RESULTS
from anagrams.normalize import split_sentence

app = Flask(__name__)
_engine: Engine | None = None


def _require_engine() -> Engine:
    if _engine is None:
        raise RuntimeError("Engine not initialized. Run main() or assign frontend.web._engine.")
    return _engine


# ---------- API ----------
@app.get("/api/anagrams")
def api_anagrams():
    q = request.args.get("q", "", type=str)
    k = request.args.get("k", MAX_RESULTS, type=int)
    if k < 0:
        return jsonify({"error": "k must be >= 0"}), 400
    words = split_sentence(q)
    if not words:
        return jsonify([])
    rows = _require_engine().sentence_anagrams(words, limit=k or None)
    return jsonify(rows)


@app.get("/api/word")
def api_word():
    w = request.args.get("w", "", type=str).strip()
    if not w:
        return jsonify([])
    return jsonify(_require_engine().word_anagrams(w))


@app.get("/health")
def health():
    eng = _engine
    if eng is None or eng.index is None:
        return jsonify({"ok": False, "words": 0}), 503
    return jsonify({"ok": True, "words": eng.index.word_count})


# ---------- UI ----------
@app.get("/")
def home():
    # A tiny page: CSS variables + minimal JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Anagrams • Flask UI</title>
<style>
:root{
  --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6;
  --accent:#6ee7ff; --border:#1c2530;
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:860px; margin:24px auto; padding:0 16px }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px }
h1{ font-size:20px; margin:0 0 8px 0 }
form{ display:flex; gap:12px; flex-wrap:wrap }
input{
  padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px;
}
#q{ flex:1; min-width:240px }
#k{ width:80px }
input:focus{ border-color:var(--accent) }
.meta{ color:var(--muted); font-size:13px; margin-top:6px }
ol{ margin-top:16px }
li{ padding:4px 0; font-family: ui-monospace, SFMono-Regular, Menlo, Consolas, monospace }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Anagrams</h1>
      <form id="f">
        <input id="q" type="text" placeholder="Type a sentence…" autocomplete="off" autofocus />
        <input id="k" type="number" min="0" max="1000" value="50" />
      </form>
      <div id="stats" class="meta">Ready.</div>
      <ol id="out"></ol>
    </div>
  </div>
<script>
const $ = (sel) => document.querySelector(sel);
const q = $("#q"), k = $("#k"), out = $("#out"), stats = $("#stats");
let t;
async function search(){
  const query = q.value.trim();
  out.innerHTML = "";
  if(!query){ stats.textContent = "Ready."; return; }
  const resp = await fetch(`/api/anagrams?q=${encodeURIComponent(query)}&k=${k.value || 0}`);
  if(!resp.ok){ stats.textContent = `Error: HTTP ${resp.status}`; return; }
  const data = await resp.json();
  stats.textContent = `Anagrams: ${data.length}`;
  for(const s of data){
    const li = document.createElement("li");
    li.textContent = s.join(" ");
    out.appendChild(li);
  }
}
function debounced(){ clearTimeout(t); t = setTimeout(search, 200); }
q.addEventListener("input", debounced);
k.addEventListener("change", debounced);
$("#f").addEventListener("submit", (ev)=>{ ev.preventDefault(); search(); });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of the anagram Engine")
    ap.add_argument("--dictionary", default=None, help="Word list (default: bundled list)")
    ap.add_argument("--cache", default=None, help="Pickle index; loaded with --load, written otherwise")
    ap.add_argument("--load", action="store_true")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine()
    if args.load:
        if not args.cache:
            ap.error("--load requires --cache")
        _engine.load(cache=args.cache, verbose=args.verbose)
    else:
        _engine.build(args.dictionary, cache=args.cache, verbose=args.verbose)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
