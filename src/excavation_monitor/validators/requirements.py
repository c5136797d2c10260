"""Monitoring requirement matrix (GB 50497-2019, section 4.2).

Maps (pit composition, safety level) to the required, recommended and
optional monitoring items. Safety level 1 is the most stringent. A mixed
soil/rock pit combines the soil and rock requirements.
"""

from __future__ import annotations

import logging
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict

from excavation_monitor.models.pit import Composition
from excavation_monitor.models.sensors import SensorCategory

logger = logging.getLogger(__name__)

HD = SensorCategory.HORIZONTAL_DISPLACEMENT
VD = SensorCategory.VERTICAL_DISPLACEMENT
DH = SensorCategory.DEEP_HORIZONTAL
SF = SensorCategory.SUPPORT_FORCE
AF = SensorCategory.ANCHOR_FORCE
WL = SensorCategory.WATER_LEVEL
GS = SensorCategory.GROUND_SETTLEMENT
WIF = SensorCategory.WALL_INTERNAL_FORCE
PP = SensorCategory.PORE_PRESSURE
SP = SensorCategory.SOIL_PRESSURE


class RequirementSet(BaseModel):
    """Monitoring items for one pit class, in the order the standard lists them."""

    model_config = ConfigDict(frozen=True)

    required: tuple[SensorCategory, ...]
    recommended: tuple[SensorCategory, ...] = ()
    optional: tuple[SensorCategory, ...] = ()


REQUIREMENTS = MappingProxyType({
    (Composition.SOIL, 1): RequirementSet(
        required=(HD, VD, DH, SF, WL, GS),
        recommended=(AF,),
        optional=(WIF, PP, SP),
    ),
    (Composition.SOIL, 2): RequirementSet(
        required=(HD, VD, DH, SF, WL, GS),
        recommended=(AF,),
        optional=(WIF, PP),
    ),
    (Composition.SOIL, 3): RequirementSet(
        required=(HD, VD, WL),
        recommended=(DH, SF, GS),
        optional=(AF,),
    ),
    (Composition.ROCK, 1): RequirementSet(
        required=(HD, VD, AF, GS),
        recommended=(WL,),
    ),
    (Composition.ROCK, 2): RequirementSet(
        required=(HD, GS),
        recommended=(VD, AF, WL),
    ),
    (Composition.ROCK, 3): RequirementSet(
        required=(HD,),
        recommended=(GS,),
        optional=(VD, AF),
    ),
    (Composition.SOIL_ROCK, 1): RequirementSet(
        required=(HD, VD, DH, SF, AF, WL, GS),
        optional=(WIF, PP),
    ),
    (Composition.SOIL_ROCK, 2): RequirementSet(
        required=(HD, VD, DH, SF, WL, GS),
        recommended=(AF,),
    ),
    (Composition.SOIL_ROCK, 3): RequirementSet(
        required=(HD, VD, WL),
        recommended=(DH, SF, GS),
        optional=(AF,),
    ),
})


def resolve(composition: Composition | str, safety_level: int) -> RequirementSet | None:
    """Look up the requirement set for a pit class.

    Returns None for any combination outside the nine the standard defines.
    """
    try:
        key = (Composition(composition), int(safety_level))
    except (ValueError, TypeError):
        logger.debug("Unresolvable pit class %r / %r", composition, safety_level)
        return None

    requirements = REQUIREMENTS.get(key)
    if requirements is None:
        logger.debug("No requirements for %s level %s", key[0].value, key[1])
    return requirements
