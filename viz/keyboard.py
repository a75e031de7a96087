# viz/keyboard.py
from typing import List, Optional
import pygame as pg

QUIT = "quit"

def key_symbol(event) -> Optional[str]:
    """Single lower-case character for a KEYDOWN event, else None."""
    if event.type != pg.KEYDOWN:
        return None
    ch = getattr(event, "unicode", "") or ""
    if len(ch) != 1:
        return None
    return ch.lower()

class Keyboard:
    def poll(self) -> List[str]:
        out = []
        for e in pg.event.get():
            if e.type == pg.QUIT:
                return [QUIT]
            if e.type == pg.KEYDOWN:
                if e.key == pg.K_ESCAPE: return [QUIT]
                sym = key_symbol(e)
                if sym is not None:
                    out.append(sym)
        return out
