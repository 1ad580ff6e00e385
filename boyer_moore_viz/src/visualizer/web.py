from __future__ import annotations
import argparse
import logging
from typing import Any, Dict

from flask import Flask, Response, jsonify, request

from boyer_moore import config as CFG
from boyer_moore.engine import Matcher
from boyer_moore.errors import InvalidPatternError

log = logging.getLogger(__name__)

app = Flask(__name__)


def _tables_json(matcher: Matcher) -> Dict[str, Any]:
    gs = matcher.tables.good_suffix
    return {
        "last_occurrence": matcher.tables.last_occurrence.as_dict(),
        "shift": list(gs.shift),
        "border_position": list(gs.border_position),
    }


def _flag(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return str(value).lower() not in ("", "0", "false", "no", "off")


# ---------- API ----------
@app.route("/api/search", methods=["GET", "POST"])
def api_search():
    payload = request.get_json(silent=True)
    if payload is None:
        payload = {}
    elif not isinstance(payload, dict):
        return jsonify({"error": "request body must be a JSON object"}), 400
    pattern = payload.get("pattern", request.args.get("pattern", "", type=str))
    text = payload.get("text", request.args.get("text", "", type=str))
    trace = _flag(payload.get("trace", request.args.get("trace", "1")))

    if not isinstance(pattern, str) or not isinstance(text, str):
        return jsonify({"error": "pattern and text must be strings"}), 400
    if len(text) > CFG.MAX_TEXT_LENGTH:
        return jsonify({"error": f"text longer than {CFG.MAX_TEXT_LENGTH} characters"}), 400
    try:
        matcher = Matcher(pattern)
    except InvalidPatternError as exc:
        return jsonify({"error": str(exc)}), 400

    result = matcher.search(text, trace=trace)
    body = result.to_dict()
    body["tables"] = _tables_json(matcher)
    return jsonify(body)


@app.get("/health")
def health():
    return jsonify({"ok": True})


# ---------- UI ----------
@app.get("/")
def home():
    # Single page: fetch the trace once, then step through it client-side.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Boyer-Moore • Step Replayer</title>
<style>
:root{
  --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6;
  --accent:#6ee7ff; --border:#1c2530; --bad:#ff5d5d; --ok:#45d483;
}
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,Arial; }
.container{ max-width:980px; margin:24px auto; padding:0 16px }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px }
h1{ font-size:20px; margin:0 0 8px 0 }
.controls{ display:flex; gap:12px; flex-wrap:wrap; margin:12px 0 }
input{ flex:1; min-width:200px; padding:10px 12px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); font-size:15px }
.btn{ padding:10px 14px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); cursor:pointer }
.btn:hover{ border-color:var(--accent) }
.mono{ font-family: ui-monospace, SFMono-Regular, Menlo, Consolas, monospace; white-space:pre }
.ok{ color:var(--ok); font-weight:700 } .bad{ color:var(--bad); font-weight:700 }
.meta{ color:var(--muted); font-size:13px; margin-top:10px }
.err{ display:none; margin-top:12px; color:#ffb0b0 }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Boyer-Moore step replayer</h1>
      <form id="f" class="controls">
        <input id="text" placeholder="Text" value="GCTAGCTCTACGAGTCTA" />
        <input id="pattern" placeholder="Pattern" value="TCTA" />
        <button class="btn" type="submit">Search</button>
      </form>
      <div class="controls">
        <button id="prev" class="btn" type="button">&larr; Prev</button>
        <button id="next" class="btn" type="button">Next &rarr;</button>
      </div>
      <div id="rows" class="mono"></div>
      <div id="info" class="meta">Enter a text and a pattern.</div>
      <div id="err" class="err"></div>
    </div>
  </div>
<script>
const $ = (s) => document.querySelector(s);
let data = null, idx = 0;
const esc = (s) => s.replace(/[&<>]/g, (c) => ({"&":"&amp;","<":"&lt;",">":"&gt;"})[c]);

function draw(){
  if(!data || !data.steps || data.steps.length === 0){
    $("#rows").textContent = ""; $("#info").textContent = data ? "No alignments (pattern longer than text)." : "";
    return;
  }
  const st = data.steps[idx], text = $("#text").value, pat = $("#pattern").value, s = st.window_start;
  const from = st.is_match ? 0 : st.mismatch_index;
  const mark = (str, off) => Array.from(str).map((c, i) => {
    const k = i - off;
    if(k < from || k >= pat.length) return esc(c);
    return `<span class="${!st.is_match && k === from ? "bad" : "ok"}">${esc(c)}</span>`;
  }).join("");
  $("#rows").innerHTML = mark(text, s) + "\n" + " ".repeat(s) + mark(pat, 0);
  $("#info").textContent = `Alignment ${st.alignment}/${data.steps.length} • window ${s} • `
    + (st.is_match ? "match" : `mismatch at ${st.mismatch_index}`)
    + ` • bad char ${st.bad_character_shift} • good suffix ${st.good_suffix_shift}`
    + ` • shift ${st.shift} (${st.rule}) • matches so far: `
    + JSON.stringify(data.matches.filter((m) => m <= s));
}

$("#f").addEventListener("submit", async (ev) => {
  ev.preventDefault();
  $("#err").style.display = "none";
  const resp = await fetch("/api/search", {method:"POST", headers:{"Content-Type":"application/json"},
    body: JSON.stringify({text: $("#text").value, pattern: $("#pattern").value, trace: true})});
  const body = await resp.json();
  if(!resp.ok){ $("#err").style.display = "block"; $("#err").textContent = body.error; data = null; draw(); return; }
  data = body; idx = 0; draw();
});
$("#prev").addEventListener("click", () => { if(data && idx > 0){ idx--; draw(); } });
$("#next").addEventListener("click", () => { if(data && idx < data.steps.length - 1){ idx++; draw(); } });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Serve the Boyer-Moore step replayer")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose or CFG.VERBOSE:
        logging.basicConfig(level=logging.INFO)
    log.info("Serving on http://%s:%d", args.host, args.port)
    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
