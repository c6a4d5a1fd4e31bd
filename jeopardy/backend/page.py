"""Single-page front end for the trivia board.

The page only paints what the API returns; reveal rules live in the backend.
"""

GAME_PAGE = r"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Jeopardy</title>
<style>
  body { background: #060ce9; color: #fff; font-family: Arial, Helvetica, sans-serif; text-align: center; margin: 0; padding: 16px; }
  h1 { letter-spacing: 4px; }
  button { font-size: 18px; padding: 8px 24px; margin: 12px; cursor: pointer; }
  .hidden { display: none; }
  .loader { display: inline-block; width: 48px; height: 48px; border: 6px solid #fff; border-bottom-color: transparent; border-radius: 50%; animation: spin 1s linear infinite; }
  .loader.hidden { display: none; }
  @keyframes spin { to { transform: rotate(360deg); } }
  .error { color: #ffd700; margin: 12px; }
  table { margin: 0 auto; border-collapse: collapse; }
  th, td { border: 3px solid #000; width: 150px; height: 90px; padding: 6px; }
  th { font-size: 16px; }
  td { font-size: 26px; color: #ffd700; font-weight: bold; }
  td.tableText { font-size: 14px; color: #fff; }
  td.textHover:hover { background: #2a31ff; cursor: pointer; }
</style>
</head>
<body>
<h1>JEOPARDY</h1>
<button id="start">START</button>
<div><span class="loader hidden" id="loader"></span></div>
<div class="error hidden" id="error"></div>
<div class="gameContainer" id="game"></div>
<script>
const startBtn = document.getElementById("start");
const loader = document.getElementById("loader");
const errorBox = document.getElementById("error");
const game = document.getElementById("game");

function paintCell(td, cell) {
  td.textContent = cell.text;
  td.classList.toggle("textHover", cell.hoverable);
  td.classList.toggle("tableText", cell.state !== "hidden");
}

function drawBoard(board) {
  game.innerHTML = "";
  const table = document.createElement("table");
  const headRow = table.createTHead().insertRow();
  for (const title of board.headers) {
    const th = document.createElement("th");
    th.textContent = title;
    headRow.appendChild(th);
  }
  const body = table.createTBody();
  for (const row of board.rows) {
    const tr = body.insertRow();
    for (const cell of row) {
      const td = tr.insertCell();
      td.dataset.row = cell.row;
      td.dataset.col = cell.column;
      paintCell(td, cell);
    }
  }
  game.appendChild(table);
}

function applyState(state) {
  startBtn.textContent = state.button_label;
  loader.classList.toggle("hidden", !state.loading);
  startBtn.classList.toggle("hidden", state.loading);
  errorBox.classList.toggle("hidden", !state.error);
  errorBox.textContent = state.error || "";
  if (state.board) {
    drawBoard(state.board);
  } else {
    game.innerHTML = "";
  }
  if (state.loading) {
    setTimeout(refresh, 500);
  }
}

async function refresh() {
  const resp = await fetch("/api/state");
  applyState(await resp.json());
}

startBtn.addEventListener("click", async () => {
  const resp = await fetch("/api/start", { method: "POST" });
  applyState(await resp.json());
});

game.addEventListener("click", async (evt) => {
  const td = evt.target.closest("td");
  if (!td) return;
  const resp = await fetch(`/api/cells/${td.dataset.row}/${td.dataset.col}`, { method: "POST" });
  if (!resp.ok) return;
  const cell = await resp.json();
  if (cell.changed) paintCell(td, cell);
});

refresh();
</script>
</body>
</html>
"""
