from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from wordgraph import Engine, InsufficientInputError
from wordgraph import config as CFG
from wordgraph.bridge import find_bridge_words, format_bridge_words
from wordgraph.errors import UnreachableError, WordNotFoundError, missing_message
from wordgraph.normalize import normalize_word
from wordgraph.paths import format_path, shortest_path
from wordgraph.rank import top_ranked

app = Flask(__name__)
_engine: Engine | None = None

def _bad_request(msg: str):
    return jsonify({"error": msg}), 400

def _graph():
    if _engine is None or _engine.graph is None:
        raise RuntimeError("Engine not initialized. Call build() first.")
    return _engine.graph

def _two_words():
    w1 = request.args.get("word1", None, type=str)
    w2 = request.args.get("word2", None, type=str)
    return w1, w2

# ---------- API ----------
@app.get("/api/health")
def api_health():
    loaded = _engine is not None and _engine.graph is not None
    return jsonify({"ok": True, "loaded": loaded})

@app.get("/api/graph")
def api_graph():
    g = _graph()
    return jsonify({
        "vertices": len(g),
        "edges": [{"source": e.source, "target": e.target, "weight": e.weight} for e in g.edges()],
    })

@app.get("/api/bridge")
def api_bridge():
    w1, w2 = _two_words()
    if w1 is None or w2 is None:
        return _bad_request("word1 and word2 are required")
    res = find_bridge_words(_graph(), w1, w2)
    return jsonify({
        "word1": res.word1, "word2": res.word2,
        "bridges": list(res.bridges), "missing": list(res.missing),
        "message": format_bridge_words(res),
    })

@app.route("/api/generate", methods=["GET", "POST"])
def api_generate():
    if request.method == "POST":
        body = request.get_json(silent=True) or {}
        text = body.get("text")
    else:
        text = request.args.get("text", None, type=str)
    if text is None:
        return _bad_request("text is required")
    return jsonify({"input": text, "text": _engine.generate_new_text(text)})  # type: ignore

@app.get("/api/path")
def api_path():
    w1, w2 = _two_words()
    if w1 is None or w2 is None:
        return _bad_request("word1 and word2 are required")
    try:
        res = shortest_path(_graph(), w1, w2)
    except WordNotFoundError as exc:
        return jsonify({"found": False, "missing": list(exc.missing), "message": str(exc)})
    except UnreachableError as exc:
        return jsonify({"found": False, "missing": [], "message": str(exc)})
    return jsonify({"found": True, "path": list(res.words), "length": res.length,
                    "message": format_path(res)})

@app.get("/api/pagerank")
def api_pagerank():
    word = request.args.get("word", None, type=str)
    if word is None:
        k = request.args.get("top", CFG.TOP_K, type=int)
        return jsonify([{"word": w, "rank": r} for w, r in top_ranked(_graph(), k)])
    pr = _engine.cal_page_rank(word)  # type: ignore
    if pr == CFG.PAGERANK_MISSING:
        return jsonify({"word": normalize_word(word), "rank": None,
                        "message": missing_message([normalize_word(word)])})
    return jsonify({"word": normalize_word(word), "rank": pr})

@app.get("/api/walk")
def api_walk():
    limit = request.args.get("limit", 0, type=int)
    words, truncated = [], False
    for w in _engine.iter_random_walk():  # type: ignore
        if limit > 0 and len(words) >= limit:
            truncated = True
            break
        words.append(w)
    return jsonify({"words": words, "truncated": truncated})

# ---------- UI ----------
@app.get("/")
def home():
    # Single page, no external deps: one form per operation, JSON rendered as text.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Word Graph • Flask UI</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial; }
.container{ max-width:980px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; margin-bottom:14px; }
h1{ font-size:20px; margin:0 0 8px 0 }
h2{ font-size:15px; margin:0 0 8px 0; color:var(--muted) }
input{ padding:10px 12px; border-radius:10px; border:1px solid var(--border); background:#0b1117; color:var(--ink); }
input:focus{ border-color:var(--accent); outline:none }
.btn{ padding:10px 14px; border-radius:10px; border:1px solid var(--border); background:#0b1117; color:var(--ink); cursor:pointer; }
.btn:hover{ border-color:var(--accent) }
pre{ white-space:pre-wrap; margin:10px 0 0 0; color:var(--muted) }
</style>
</head>
<body>
  <div class="container">
    <div class="card"><h1>Word Graph</h1><div id="stats">Loading…</div></div>
    <div class="card"><h2>Bridge words / Shortest path</h2>
      <input id="w1" placeholder="word1" /> <input id="w2" placeholder="word2" />
      <button class="btn" id="bridge">Bridge words</button> <button class="btn" id="path">Shortest path</button>
      <pre id="out2"></pre></div>
    <div class="card"><h2>Generate new text</h2>
      <input id="text" placeholder="Seek to explore new and exciting synergies" size="60" />
      <button class="btn" id="gen">Generate</button><pre id="out3"></pre></div>
    <div class="card"><h2>PageRank / Random walk</h2>
      <input id="word" placeholder="word (empty = top 10)" />
      <button class="btn" id="pr">PageRank</button> <button class="btn" id="walk">Random walk</button>
      <pre id="out4"></pre></div>
  </div>
<script>
const $ = (sel) => document.querySelector(sel);
async function get(url, opts){
  const resp = await fetch(url, opts);
  const data = await resp.json();
  if(!resp.ok) throw new Error(data.error ?? `HTTP ${resp.status}`);
  return data;
}
function show(el, fn){ fn().then(d => el.textContent = typeof d === "string" ? d : JSON.stringify(d, null, 2))
                           .catch(e => el.textContent = `Error: ${e.message ?? e}`); }
const pair = () => `word1=${encodeURIComponent($("#w1").value)}&word2=${encodeURIComponent($("#w2").value)}`;
$("#bridge").onclick = () => show($("#out2"), async () => (await get(`/api/bridge?${pair()}`)).message);
$("#path").onclick = () => show($("#out2"), async () => (await get(`/api/path?${pair()}`)).message);
$("#gen").onclick = () => show($("#out3"), async () => (await get("/api/generate", {
  method:"POST", headers:{"Content-Type":"application/json"}, body:JSON.stringify({text:$("#text").value})})).text);
$("#pr").onclick = () => show($("#out4"), async () => {
  const w = $("#word").value.trim();
  return w ? await get(`/api/pagerank?word=${encodeURIComponent(w)}`) : await get("/api/pagerank");
});
$("#walk").onclick = () => show($("#out4"), async () => (await get("/api/walk")).words.join(" "));
get("/api/graph").then(d => $("#stats").textContent = `${d.vertices} words • ${d.edges.length} edges`)
                 .catch(e => $("#stats").textContent = `Error: ${e.message ?? e}`);
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("--file", required=True, help="Text file to build the graph from")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine()
    try:
        _engine.build(args.file, verbose=args.verbose)
    except (FileNotFoundError, InsufficientInputError) as exc:
        print(exc)
        print("Failed to build graph. Exiting.")
        return 1

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
