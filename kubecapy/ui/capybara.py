"""The capybara easter-egg screen."""

from __future__ import annotations

from kubecapy.app import App
from kubecapy.ui.view import Row, Tone, View

SECTION_TITLE = "🐹 Easter Egg: The Zen of Capybara Hacking 🐹"

_ART = (
    "           ░░░░░░░░░░░░░░░░░░░░░░",
    "         ░░                    ░░",
    "       ░░  ●●              ●●    ░░",
    "     ░░      ┌────────────┐        ░░",
    "   ░░        │ > kubectl  │          ░░",
    "   ░░        │ > analyze  │          ░░",
    "   ░░        │ > hack...  │          ░░",
    "   ░░        └────────────┘          ░░",
    "     ░░                            ░░",
    "       ░░  ∩━━━━━━━━━━━━━━━━━━━━∩  ░░",
    "         ░░                      ░░",
    "           ░░░░░░░░░░░░░░░░░░░░░░",
)


def build_capybara(app: App) -> View:
    """Describe the easter-egg screen; it does not depend on the session state."""
    rows = [
        Row(""),
        Row("🎩 CAPYBARA HACKER 🐹", Tone.CYAN, bold=True),
        Row(""),
        *(Row(line) for line in _ART),
        Row(""),
        Row('"In the world of containers and clusters,', Tone.YELLOW),
        Row(" even the most complex Kubernetes issues", Tone.YELLOW),
        Row(' can be solved with zen-like calm..."', Tone.YELLOW),
        Row(""),
        Row("                    - Master Capybara 🧘‍♂️", Tone.GREEN),
        Row(""),
        Row("Fun Fact: Capybaras are the world's largest rodents", Tone.MAGENTA),
        Row("and are excellent swimmers... just like this tool", Tone.MAGENTA),
        Row("navigates through your Kubernetes clusters! 🏊‍♂️", Tone.MAGENTA),
        Row(""),
        Row("Press ESC to return to the main menu", Tone.CYAN),
    ]
    return View(sections=[(SECTION_TITLE, rows)])