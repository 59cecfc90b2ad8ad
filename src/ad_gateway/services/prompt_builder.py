"""Prompt builder — renders vehicle fields into the ad request narrative.

Rendering is a pure function of its input: identical :class:`CarDetails`
always produce byte-identical text.  Optional fields that are empty are
left out entirely, including the blank line that would separate their block.
"""

from __future__ import annotations

from ad_gateway import texts
from ad_gateway.domain.entities import CarDetails, RenderedPrompt


def render_ad_prompt(car: CarDetails) -> str:
    """Return the user-turn text describing *car*."""
    lines: list[str] = [
        texts.AD_PROMPT_HEADER,
        "",
        f"Märke: {car.brand}",
        f"Modell: {car.model}",
    ]
    if car.year:
        lines.append(f"Årsmodell: {car.year}")
    if car.mileage:
        lines.append(f"Miltal: {car.mileage} mil")
    if car.price:
        lines.append(f"Pris: {car.price} kr")

    if car.equipment:
        lines += ["", f"Utrustning:\n{car.equipment}"]
    if car.condition:
        lines += ["", f"Skick:\n{car.condition}"]

    lines += ["", texts.AD_PROMPT_CLOSING]
    return "\n".join(lines)


def build_prompt(system_prompt: str, car: CarDetails) -> RenderedPrompt:
    """Pair the instruction template (verbatim) with the rendered narrative."""
    return RenderedPrompt(system=system_prompt, user=render_ad_prompt(car))
