# hillclimb/app/viewer.py
#!/usr/bin/env python3
"""
Hill-Climb Viewer — animated reverse Dijkstra over a height map

- Keyboard:
    [1]/[2]/[3]  -> switch map
    [A]/[B]      -> query (A: start -> end, B: nearest lowest cell -> end)
    [SPACE]      -> run/pause
    [N]          -> single step
    [R]          -> reset
    [+]/[-]      -> steps/sec
    [Q]/[ESC]    -> quit

The search always grows outward from the end cell (E); once the frontier is
empty the chosen query is read off the finished parent map and drawn.

Config:
- ENV: HILLCLIMB_QUERY=direct|nearest, HILLCLIMB_MAP_DIR=<dir>
- CLI: --query=direct|nearest, --map-dir=<dir>
"""

# --- bootstrap import path so `from hillclimb...` works when run as a script ---
import sys, os, time
from pathlib import Path
_REPO_ROOT = Path(__file__).resolve().parents[2]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))
# -------------------------------------------------------------------------------

from typing import Dict, List, Optional, Tuple
import pygame

from hillclimb.core.dijkstra import DijkstraAlgo
from hillclimb.core.grid import ElevationGrid, MAX_ELEVATION
from hillclimb.core.parse import load_map
from hillclimb.core.queries import QUERY_MODES, run_query
from hillclimb.core.types import Cell, QueryResult

# ---------- Config resolution ----------
def _argv_flag(name: str) -> Optional[str]:
    value = None
    for arg in sys.argv:
        if arg.startswith(f"--{name}="):
            value = arg.split("=", 1)[1]
    return value

def resolve_query_mode() -> str:
    mode = (_argv_flag("query") or os.getenv("HILLCLIMB_QUERY", "direct")).lower()
    return mode if mode in QUERY_MODES else "direct"

def resolve_map_dir() -> Path:
    raw = _argv_flag("map-dir") or os.getenv("HILLCLIMB_MAP_DIR")
    return Path(raw) if raw else _REPO_ROOT / "maps"

MAP_DIR = resolve_map_dir()
MAP_FILES = {
    "01_sample": MAP_DIR / "01_sample.txt",
    "02_walled": MAP_DIR / "02_walled.txt",
    "03_ridges": MAP_DIR / "03_ridges.txt",
}
MAP_LABELS = {
    "01_sample": "Map 1: Sample",
    "02_walled": "Map 2: Walled",
    "03_ridges": "Map 3: Ridges",
}
QUERY_LABELS = {
    "direct":  "Query A: S -> E",
    "nearest": "Query B: lowest -> E",
}
PANEL_W = 600            # right band: metrics + buttons
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 24
FONT_NAME = None  # default pygame font

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
BLUE        = ( 70,130,180)
RED         = (220, 50, 47)
LOW_GREEN   = ( 34, 92, 60)
HIGH_SNOW   = (236,232,220)
NEON_CYAN_A = (0,150,255,110)
NEON_MAG_A  = (255,0,120,90)
NEON_MINT   = (0,255,200)

CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)

def elevation_color(v: int) -> Tuple[int, int, int]:
    """Valley green fading to snow at the highest level."""
    t = max(0.0, min(1.0, v / MAX_ELEVATION))
    return (
        int(LOW_GREEN[0] + (HIGH_SNOW[0]-LOW_GREEN[0]) * t),
        int(LOW_GREEN[1] + (HIGH_SNOW[1]-LOW_GREEN[1]) * t),
        int(LOW_GREEN[2] + (HIGH_SNOW[2]-LOW_GREEN[2]) * t),
    )

# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False  # highlight state

    def set_active(self, value: bool):
        self.active = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        if self.active and self.togglable:
            bg = (58, 86, 160, 235)
        elif self.hover:
            bg = (46, 50, 60, 230)
        else:
            bg = (36, 40, 48, 220)
        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)

        hi = pygame.Surface((self.rect.width, 18), pygame.SRCALPHA)
        pygame.draw.rect(hi, (255,255,255,20), hi.get_rect(), border_radius=10)
        base.blit(hi, (0,0))
        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, (120, 170, 255, 255), self.rect, width=2, border_radius=10)

        text = font.render(self.label, True, (235,238,242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event):
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()

# ---------- Viewer ----------
class Viewer:
    def __init__(self, grid: ElevationGrid, map_key: str = "custom", query: Optional[str] = None):
        pygame.init()

        self.grid = grid
        self.cell_size = self._auto_cell_size(grid)
        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)
        self._letter_cache: Dict[Tuple[int, int], pygame.Surface] = {}

        grid_px_w = GRID_MARGIN*2 + grid.width * self.cell_size
        grid_px_h = GRID_MARGIN*2 + grid.height* self.cell_size
        win_w = grid_px_w + max(PANEL_W, 360)
        win_h = max(grid_px_h, 560)

        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption(f"Hill Climb — {map_key}")

        self._buttons: List[UIButton] = []
        self.open_set: set = set()
        self.closed_set: set = set()
        self.path: List[Cell] = []
        self.result: Optional[QueryResult] = None

        self.running = False
        self.clock = pygame.time.Clock()
        self.steps_per_sec = 8
        self.state = "Idle"
        self.selected_map_key = map_key
        self.selected_query = query or resolve_query_mode()

        self._layout(win_w, win_h)

        self._aspect = max(1e-6, win_w / win_h)
        self._min_w  = 640
        self._min_h  = int(self._min_w / self._aspect)

        self.algo = DijkstraAlgo(name="Dijkstra (reverse)")
        self.algo.init(self.grid)
        self._reset_overlays()

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Compute integer cell_size that fits window and center the grid."""
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)

        cs_by_w = avail_w // self.grid.width
        cs_by_h = avail_h // self.grid.height
        self.cell_size = int(max(8, min(cs_by_w, cs_by_h))) or 8

        grid_plate_w = self.grid.width  * self.cell_size + 2 * GRID_MARGIN
        grid_plate_h = self.grid.height * self.cell_size + 2 * GRID_MARGIN

        left_x = max(0, (win_w - (grid_plate_w + PANEL_W)) // 2)
        left_x = min(left_x, max(0, win_w - PANEL_W - grid_plate_w))
        top_y  = max(0, (win_h - grid_plate_h) // 2)

        self.canvas_rect = pygame.Rect(left_x, top_y, grid_plate_w, grid_plate_h)
        self._grid_origin = (self.canvas_rect.x + GRID_MARGIN,
                             self.canvas_rect.y + GRID_MARGIN)

        self._right_band = pygame.Rect(self.canvas_rect.right, 0,
                                       max(PANEL_W, win_w - self.canvas_rect.right),
                                       win_h)
        self._letter_cache.clear()
        self._build_buttons()

    def _auto_cell_size(self, grid: ElevationGrid) -> int:
        target_h = 720 - GRID_MARGIN*2
        return max(14, min(CELL_SIZE_DEFAULT, target_h // grid.height))

    def run(self):
        while True:
            self._handle_events()
            if self.running:
                self._tick_algorithm()
            self._draw()
            self.clock.tick(60)

    def _tick_algorithm(self):
        t0 = time.time()
        step_interval = 1.0 / max(1, self.steps_per_sec)
        if not hasattr(self, "_last_step_t"):
            self._last_step_t = 0.0
        if t0 - self._last_step_t >= step_interval:
            self._last_step_t = t0
            self._do_step()

    def _do_step(self):
        if self.state in ("Done", "No path"):
            return
        res = self.algo.step()
        for c in res.opened: self.open_set.add(c)
        for c in res.closed:
            self.closed_set.add(c)
            self.open_set.discard(c)
        if res.metrics:
            self._last_metrics.update(res.metrics)

        if res.status == "done":
            self._finish()
        else:
            self.state = "Running" if self.running else "Idle"

    def _finish(self):
        # search from E is complete; answer the query from its parent map
        self.result = run_query(self.grid, self.selected_query, self.algo.parent)
        self.running = False
        if self.result.found:
            self.path = self.result.path
            self.state = "Done"
        else:
            self.path = []
            self.state = "No path"
        self._last_metrics["steps"] = self.result.steps
        self._refresh_active_states()

    # ---------- resizer ----------
    def _apply_aspect_resize(self, req_w: int, req_h: int):
        req_w = max(self._min_w, req_w)
        req_h = max(self._min_h, req_h)

        cand_h_from_w = int(round(req_w / self._aspect))
        cand_w_from_h = int(round(req_h * self._aspect))

        if abs(req_h - cand_h_from_w) <= abs(req_w - cand_w_from_h):
            new_w, new_h = req_w, cand_h_from_w
        else:
            new_w, new_h = cand_w_from_h, req_h

        self.screen = pygame.display.set_mode((new_w, new_h), pygame.RESIZABLE)
        self._layout(new_w, new_h)

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_SPACE:
                    self._toggle_run()
                elif e.key == pygame.K_r:
                    self._reset()
                elif e.key == pygame.K_n:
                    self._do_step()
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._bump_speed(+1)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
                    self._bump_speed(-1)
                elif e.key == pygame.K_1:
                    self._switch_map("01_sample")
                elif e.key == pygame.K_2:
                    self._switch_map("02_walled")
                elif e.key == pygame.K_3:
                    self._switch_map("03_ridges")
                elif e.key == pygame.K_a:
                    self._switch_query("direct")
                elif e.key == pygame.K_b:
                    self._switch_query("nearest")
            elif e.type == pygame.VIDEORESIZE:
                self._apply_aspect_resize(e.w, e.h)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                for b in self._buttons:
                    b.handle_mouse(e)

    def _switch_map(self, key: str):
        if key not in MAP_FILES: return
        try:
            grid = load_map(MAP_FILES[key])
        except (OSError, ValueError) as ex:
            print(f"Failed to load map {key}: {ex}")
            return
        self.grid = grid
        self.selected_map_key = key
        pygame.display.set_caption(f"Hill Climb — {key}")
        self.algo.init(self.grid)
        self._layout(*self.screen.get_size())
        self.running = False; self.state = "Idle"
        self._reset_overlays()

    def _switch_query(self, mode: str):
        self.selected_query = mode
        if self.algo.done:
            # the parent map does not depend on the query; just re-read it
            self._finish()
        else:
            self._refresh_active_states()

    def _reset_overlays(self):
        self.open_set = set(self.algo.open_set)
        self.closed_set.clear()
        self.path = []
        self.result = None
        self._last_metrics = {
            "algo": self.algo.name,
            "popped": 0,
            "stale": 0,
            "open_size": len(self.open_set),
            "closed_count": 0,
            "steps": None,
        }
        self._refresh_active_states()

    def _reset(self):
        self.running = False
        self.state = "Idle"
        self.algo.reset()
        self._reset_overlays()

    # ---------- drawing ----------
    def _draw(self):
        self._draw_backdrop()
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _draw_backdrop(self):
        w, h = self.screen.get_size()
        top = (24, 26, 32); bot = (36, 40, 48)
        for y in range(h):
            t = y / max(1, h-1)
            c = (
                int(top[0] + (bot[0]-top[0]) * t),
                int(top[1] + (bot[1]-top[1]) * t),
                int(top[2] + (bot[2]-top[2]) * t),
            )
            pygame.draw.line(self.screen, c, (0, y), (w, y))

    def _letter(self, v: int) -> pygame.Surface:
        key = (v, self.cell_size)
        if key not in self._letter_cache:
            color = BLACK if v > MAX_ELEVATION // 2 else WHITE
            self._letter_cache[key] = self.font_small.render(chr(ord("a") + v), True, color)
        return self._letter_cache[key]

    def _draw_grid(self):
        cs = self.cell_size
        ox, oy = self._grid_origin

        for (col, row) in self.grid.iter_cells():
            v = self.grid.elevation((col, row))
            rect = pygame.Rect(ox + col*cs, oy + row*cs, cs, cs)
            pygame.draw.rect(self.screen, elevation_color(v), rect)
            if cs >= 16:
                txt = self._letter(v)
                self.screen.blit(txt, txt.get_rect(center=rect.center))
            pygame.draw.rect(self.screen, BLACK, rect, 1)

        # overlays
        for (col,row) in self.closed_set:
            s = pygame.Surface((cs, cs), pygame.SRCALPHA); s.fill(NEON_MAG_A)
            self.screen.blit(s, (ox + col*cs, oy + row*cs))

        for (col,row) in self.open_set:
            s = pygame.Surface((cs, cs), pygame.SRCALPHA); s.fill(NEON_CYAN_A)
            self.screen.blit(s, (ox + col*cs, oy + row*cs))

        # path
        if len(self.path) >= 2:
            pts = [(ox + col*cs + cs//2, oy + row*cs + cs//2) for (col, row) in self.path]
            glow = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
            pygame.draw.lines(glow, (0, 255, 220, 60), False, pts, 7)
            self.screen.blit(glow, (0,0), special_flags=pygame.BLEND_ADD)
            pygame.draw.lines(self.screen, NEON_MINT, False, pts, 5)

        origin = self.result.origin if self.result and self.result.found else self.grid.start
        self._draw_badge(origin, "S", BLUE)
        self._draw_badge(self.grid.end, "E", RED)

    def _draw_badge(self, cell: Cell, label: str, color: Tuple[int,int,int]):
        cs = self.cell_size
        ox, oy = self._grid_origin
        col, row = cell
        cx = ox + col*cs + cs//2
        cy = oy + row*cs + cs//2
        pygame.draw.circle(self.screen, color, (cx,cy), max(6, cs//2 - 2))
        txt = self.font_small.render(label, True, WHITE)
        self.screen.blit(txt, txt.get_rect(center=(cx,cy)))

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 230  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 38
        gap = 10

        def add(label, cb, *, togglable=False, store_as: Optional[str] = None):
            btn = UIButton(label, pygame.Rect(x, y, w, h), cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Run / Pause", self._toggle_run, togglable=True, store_as="btn_run"); y += h + gap
        add("Step Once", self._do_step); y += h + gap
        add("Reset", self._reset);       y += h + gap

        minus_rect = pygame.Rect(x, y, (w-8)//2, h)
        plus_rect  = pygame.Rect(x + (w-8)//2 + 8, y, (w-8)//2, h)
        self._buttons.append(UIButton("Speed −", minus_rect, lambda: self._bump_speed(-1)))
        self._buttons.append(UIButton("Speed +", plus_rect,  lambda: self._bump_speed(+1)))
        y += h + gap

        for mode in QUERY_MODES:
            add(QUERY_LABELS[mode], lambda m=mode: self._switch_query(m),
                togglable=True, store_as=f"btn_query_{mode}")
            y += h + gap

        for key in MAP_FILES:
            add(MAP_LABELS[key], lambda k=key: self._switch_map(k),
                togglable=True, store_as=f"btn_map_{key}")
            y += h + gap

        self._refresh_active_states()

    def _refresh_active_states(self):
        if hasattr(self, "btn_run"):
            self.btn_run.set_active(self.running)
        for mode in QUERY_MODES:
            btn = getattr(self, f"btn_query_{mode}", None)
            if btn:
                btn.set_active(self.selected_query == mode)
        for key in MAP_FILES:
            btn = getattr(self, f"btn_map_{key}", None)
            if btn:
                btn.set_active(self.selected_map_key == key)

    def _toggle_run(self):
        if self.state in ("Done", "No path"):
            return
        self.running = not self.running
        self.state = "Running" if self.running else "Paused"
        self._refresh_active_states()

    def _bump_speed(self, dv: int):
        self.steps_per_sec = int(max(1, min(60, self.steps_per_sec + dv)))

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card = pygame.Surface((rb.width - 20, 210), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0,0))
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line(f"Metrics — {self.state}", big=True, color=ACCENT_GOLD)
        m = self._last_metrics
        line(f"Popped: {m.get('popped', 0)}   Stale: {m.get('stale', 0)}")
        line(f"Open: {m.get('open_size', 0)}   Closed: {m.get('closed_count', 0)}")
        if self.state == "No path":
            line("Steps: no path")
        else:
            line(f"Steps: {m['steps'] if m.get('steps') is not None else '-'}")
        line("-" * 26)
        line(f"{MAP_LABELS.get(self.selected_map_key, 'Custom map')}")
        line(f"{QUERY_LABELS[self.selected_query]}")
        line(f"Speed: {self.steps_per_sec} steps/s")

        for b in self._buttons:
            b.draw(self.screen, self.font)

# ---------- main ----------
def main():
    key = "01_sample"
    try:
        grid = load_map(MAP_FILES[key])
    except (OSError, ValueError) as ex:
        print(f"Failed to load default map: {ex}")
        sys.exit(1)
    Viewer(grid, map_key=key).run()

if __name__ == "__main__":
    main()
