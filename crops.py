from dataclasses import dataclass
from types import MappingProxyType

# Optimal soil ranges and product catalogs per crop.
# Nitrogen and moisture in %, pH on the usual 0-14 scale.


@dataclass(frozen=True)
class Range:
    low: float
    high: float

    def contains(self, value: float) -> bool:
        return self.low <= value <= self.high

    def __str__(self) -> str:
        return f"{self.low:g}-{self.high:g}"


@dataclass(frozen=True)
class CropProfile:
    nitrogen: Range
    ph: Range
    moisture: Range
    fertilizers: tuple[str, ...] = ()
    pesticides: tuple[str, ...] = ()


CROP_PROFILES = MappingProxyType({
    "rice": CropProfile(
        nitrogen=Range(2.0, 3.5), ph=Range(5.5, 6.5), moisture=Range(80, 100),
        fertilizers=("NPK 20-10-10", "Potash", "Phosphate", "Zinc Sulfate"),
        pesticides=("Imidacloprid (for brown planthopper)", "Chlorpyrifos (for stem borer)",
                    "Propiconazole (for blast)"),
    ),
    "wheat": CropProfile(
        nitrogen=Range(2.5, 4.0), ph=Range(6.0, 7.5), moisture=Range(40, 60),
        fertilizers=("DAP (18-46-0)", "NPK 12-32-16", "Potassium Chloride"),
        pesticides=("2,4-D (for broadleaf weeds)", "Pendimethalin (pre-emergence)",
                    "Tebuconazole (for rust)"),
    ),
    "corn": CropProfile(
        nitrogen=Range(3.0, 5.0), ph=Range(6.0, 6.8), moisture=Range(50, 70),
        fertilizers=("NPK 15-15-15", "Starter Fertilizer 10-34-0", "Side-dress Nitrogen"),
        pesticides=("Atrazine (for weeds)", "Chlorpyrifos (for corn borer)",
                    "Glyphosate (post-harvest)"),
    ),
    "tomato": CropProfile(
        nitrogen=Range(2.0, 3.0), ph=Range(6.0, 6.8), moisture=Range(60, 80),
        fertilizers=("NPK 10-10-10", "Calcium Nitrate", "Magnesium Sulfate"),
        pesticides=("Imidacloprid (for whitefly)", "Mancozeb (for blight)",
                    "Spinosad (for caterpillars)"),
    ),
    "potato": CropProfile(
        nitrogen=Range(1.5, 2.5), ph=Range(5.2, 6.4), moisture=Range(65, 85),
        fertilizers=("NPK 8-24-24", "Potassium Sulfate", "Bone Meal"),
        pesticides=("Metalaxyl (for late blight)", "Imidacloprid (for aphids)",
                    "Copper oxychloride"),
    ),
    "cotton": CropProfile(
        nitrogen=Range(2.5, 4.5), ph=Range(5.8, 8.0), moisture=Range(50, 70),
        fertilizers=("NPK 15-5-10", "Boron", "Potassium Nitrate"),
        pesticides=("Emamectin Benzoate (for bollworm)", "Thiamethoxam (for thrips)",
                    "Propiconazole"),
    ),
    "sugarcane": CropProfile(
        nitrogen=Range(3.5, 5.5), ph=Range(6.5, 7.5), moisture=Range(70, 90),
        fertilizers=("NPK 12-6-12", "Filter Press Mud", "Molasses"),
        pesticides=("2,4-D (for weeds)", "Chlorpyrifos (for borers)",
                    "Carbendazim (for red rot)"),
    ),
    "beans": CropProfile(
        nitrogen=Range(1.0, 2.0), ph=Range(6.0, 7.0), moisture=Range(60, 80),
        fertilizers=("Phosphorus Fertilizer", "Potash", "Rhizobium Inoculant"),
        pesticides=("Pendimethalin (for weeds)", "Lambda-cyhalothrin (for pod borer)",
                    "Copper fungicide"),
    ),
    "spinach": CropProfile(
        nitrogen=Range(3.0, 4.5), ph=Range(6.0, 7.0), moisture=Range(70, 85),
        fertilizers=("NPK 20-10-10", "Iron Chelate", "Nitrogen Boost"),
        pesticides=("Spinosad (for leaf miners)", "Bacillus thuringiensis (for caterpillars)",
                    "Neem oil"),
    ),
    "cabbage": CropProfile(
        nitrogen=Range(2.5, 4.0), ph=Range(6.0, 6.5), moisture=Range(65, 85),
        fertilizers=("NPK 10-10-10", "Calcium", "Boron Supplement"),
        pesticides=("Deltamethrin (for diamondback moth)", "Chlorpyrifos (for aphids)",
                    "Copper sulfate"),
    ),
})

# Used for any crop not in the catalog
DEFAULT_PROFILE = CropProfile(
    nitrogen=Range(2.0, 4.0),
    ph=Range(6.0, 7.0),
    moisture=Range(60, 80),
)


def get_profile(crop: str) -> CropProfile:
    return CROP_PROFILES.get(crop, DEFAULT_PROFILE)


def list_crops() -> list[str]:
    return list(CROP_PROFILES)
