from dataclasses import dataclass, field
from enum import Enum

from config import DISPLAY_PRODUCT_LIMIT
from crops import Range, get_profile
from readings import SoilReading


class Status(str, Enum):
    DEFICIENT = "deficient"
    OPTIMAL = "optimal"
    EXCESS = "excess"


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"


@dataclass(frozen=True)
class Action:
    title: str
    description: str
    priority: Priority


@dataclass
class Diagnosis:
    crop: str
    alerts: list[str] = field(default_factory=list)
    confirmations: list[str] = field(default_factory=list)
    actions: list[Action] = field(default_factory=list)
    fertilizers: list[str] = field(default_factory=list)
    pesticides: list[str] = field(default_factory=list)
    tips: list[str] = field(default_factory=list)

    def top_products(self, limit: int = DISPLAY_PRODUCT_LIMIT) -> dict:
        return {"fertilizers": self.fertilizers[:limit], "pesticides": self.pesticides[:limit]}


@dataclass(frozen=True)
class Remedy:
    alert: str
    title: str
    description: str
    priority: Priority
    fertilizers: tuple[str, ...] = ()
    pesticides: tuple[str, ...] = ()


# Messages are formatted with crop, low, high
REMEDIES = {
    ("nitrogen", Status.DEFICIENT): Remedy(
        alert="Low nitrogen level for {crop}",
        title="Nitrogen Deficiency",
        description="Apply nitrogen-rich fertilizer. {crop} requires {low:g}-{high:g}% nitrogen.",
        priority=Priority.HIGH,
        fertilizers=("Urea (46-0-0)", "Ammonium Sulfate (21-0-0)", "Calcium Ammonium Nitrate"),
    ),
    ("nitrogen", Status.EXCESS): Remedy(
        alert="Excess nitrogen for {crop}",
        title="Excess Nitrogen",
        description="Reduce nitrogen inputs. Consider flushing with water or adding carbon-rich materials.",
        priority=Priority.MEDIUM,
    ),
    ("ph", Status.DEFICIENT): Remedy(
        alert="Soil is too acidic for {crop}",
        title="Soil Too Acidic",
        description="Add lime to raise pH to {low:g}-{high:g} range for optimal {crop} growth.",
        priority=Priority.HIGH,
        fertilizers=("Agricultural Lime", "Dolomitic Lime", "Wood Ash"),
    ),
    ("ph", Status.EXCESS): Remedy(
        alert="Soil is too alkaline for {crop}",
        title="Soil Too Alkaline",
        description="Add sulfur or organic matter to lower pH for {crop}.",
        priority=Priority.HIGH,
        fertilizers=("Sulfur", "Peat Moss", "Compost"),
    ),
    ("moisture", Status.DEFICIENT): Remedy(
        alert="Low soil moisture for {crop}",
        title="Insufficient Moisture",
        description="Increase irrigation. {crop} requires {low:g}-{high:g}% moisture.",
        priority=Priority.HIGH,
    ),
    ("moisture", Status.EXCESS): Remedy(
        alert="Excess soil moisture for {crop}",
        title="Overwatering Risk",
        description="Reduce watering to prevent root rot and fungal diseases in {crop}.",
        priority=Priority.MEDIUM,
        pesticides=("Copper Fungicide", "Mancozeb", "Proper drainage system"),
    ),
}

CONFIRMATIONS = {
    "nitrogen": "Nitrogen level is optimal for {crop}",
    "ph": "Soil pH is optimal for {crop}",
    "moisture": "Soil moisture is optimal for {crop}",
}

GENERAL_TIPS = (
    "Monitor soil conditions regularly for optimal {crop} growth",
    "Follow integrated pest management practices",
    "Apply fertilizers in split doses for better efficiency",
    "Maintain proper irrigation schedule based on growth stage",
    "Practice crop rotation to maintain soil health",
)


def classify(value: float, rng: Range) -> Status:
    if value < rng.low:
        return Status.DEFICIENT
    if value > rng.high:
        return Status.EXCESS
    return Status.OPTIMAL


def diagnose(reading: SoilReading | None) -> Diagnosis | None:
    if reading is None:
        return None

    crop = reading.crop
    profile = get_profile(crop)
    out = Diagnosis(crop=crop)

    checks = [
        ("nitrogen", reading.nitrogen, profile.nitrogen),
        ("ph", reading.ph, profile.ph),
        ("moisture", reading.moisture, profile.moisture),
    ]
    for prop, value, rng in checks:
        status = classify(value, rng)
        if status is Status.OPTIMAL:
            out.confirmations.append(CONFIRMATIONS[prop].format(crop=crop))
            continue
        remedy = REMEDIES[(prop, status)]
        fmt = {"crop": crop, "low": rng.low, "high": rng.high}
        out.alerts.append(remedy.alert.format(**fmt))
        out.actions.append(Action(
            title=remedy.title,
            description=remedy.description.format(**fmt),
            priority=remedy.priority,
        ))
        out.fertilizers.extend(remedy.fertilizers)
        out.pesticides.extend(remedy.pesticides)

    # general catalog always follows the condition-triggered products
    out.fertilizers.extend(profile.fertilizers)
    out.pesticides.extend(profile.pesticides)
    out.tips = [tip.format(crop=crop) for tip in GENERAL_TIPS]
    return out
