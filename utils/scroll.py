"""
Scroll Visibility Module - Two-threshold latch for the fixed navigation bar

The navigation bar fades in once the visitor scrolls past SHOW_THRESHOLD and
fades out again only after coming back above HIDE_THRESHOLD. Offsets between
the two thresholds keep whatever state was last set, so the bar does not
flicker while the visitor scrolls around the hero.

ScrollVisibility is the reference model of the latch. The browser script
(static/js/portfolio.js) mirrors next_state() on live scroll events, reading
the thresholds from client_config() through data attributes on the page, and
the stylesheet maps each state to the opacity given by ScrollVisibility.opacity.
"""

from typing import Dict, Union

SHOW_THRESHOLD = 300
HIDE_THRESHOLD = 100
FADE_DURATION = 0.5  # seconds

SHOWN = 'shown'
HIDDEN = 'hidden'

_OPACITY = {SHOWN: 1.0, HIDDEN: 0.0}


def next_state(offset: float, previous: str) -> str:
    """
    Compute the visibility state for a vertical scroll offset.

    Args:
        offset: Current vertical scroll offset in pixels
        previous: State before this scroll event

    Returns:
        str: SHOWN above SHOW_THRESHOLD, HIDDEN below HIDE_THRESHOLD,
        otherwise ``previous``
    """
    if offset > SHOW_THRESHOLD:
        return SHOWN
    if offset < HIDE_THRESHOLD:
        return HIDDEN
    return previous


class ScrollVisibility:
    """Latch holding the navigation bar state across scroll events."""

    def __init__(self, state: str = HIDDEN):
        if state not in _OPACITY:
            raise ValueError(f"Unknown visibility state: {state!r}")
        self.state = state

    def update(self, offset: float) -> str:
        self.state = next_state(offset, self.state)
        return self.state

    @property
    def shown(self) -> bool:
        return self.state == SHOWN

    @property
    def opacity(self) -> float:
        return _OPACITY[self.state]

    def __repr__(self):
        return f"<ScrollVisibility {self.state}>"


def client_config(initial: str = HIDDEN) -> Dict[str, Union[int, float, str]]:
    """Values rendered into the page for the browser-side latch"""
    return {
        'show_threshold': SHOW_THRESHOLD,
        'hide_threshold': HIDE_THRESHOLD,
        'fade_duration': FADE_DURATION,
        'initial_state': ScrollVisibility(initial).state,
    }
