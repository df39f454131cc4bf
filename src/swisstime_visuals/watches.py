"""
Catalog of the watch faces offered in the collection.

Preferences refer to watches by name; this module is the authority on which
names exist and which face renders each one.
"""
from dataclasses import dataclass
from enum import Enum


class WatchFaceType(str, Enum):
    """Face renderer for a watch; values are the display names."""
    VALENTINIANUS = "Valentinianus Classique"
    CONCORDIA = "Concordia Felicitas"
    JURGSEN = "Jurgsen Zenithor"
    HOROLOGIA = "Horologia Romanum"
    LEONARD = "Leonard Automatic Collection"
    YAMA_NO_TOKI = "山の時"
    CONSTANTINUS = "Constantinus Aureus Marine Chronometer"
    ROMA_MARINA = "Roma Marina"
    KANDINSKY = "Kandinsky Evening"
    PONTIFEX = "Pontifex Chronometra"
    KNOT_URUSHI = "Knot Urushi"
    CENTURIO = "Centurio Luminor"
    CHRONOMAGUS = "Chronomagus Regum"
    AVENTINUS = "Aventinus Classique"
    LUCERNA = "Lucerna Roma"
    CHANT_DU_TEMPS = "Chant du Temps"
    EDGE_OF_SECOND = "Грань Секунды"
    ZEITWERK = "Alpenglühen Zeitwerk"
    VOSTOK = "Vostok Military"

    @property
    def display_name(self):
        return self.value


@dataclass(frozen=True)
class WatchInfo:
    """
    One watch in the collection.

    Equality and hashing use the name only, so a watch is identified by its name
    wherever it is stored.
    """
    name: str
    description: str
    face_type: WatchFaceType

    def __eq__(self, other):
        if not isinstance(other, WatchInfo):
            return NotImplemented
        return self.name == other.name

    def __hash__(self):
        return hash(self.name)


ALL_WATCHES = (
    WatchInfo(
        name="Valentinianus Classique",
        description=("The Valentinianus Classique embodies the essence of pure style with its minimalist "
                     "design and exceptional craftsmanship. Founded in 1755, Valentinianus is one of the "
                     "oldest watch manufacturers in the world, known for its elegant timepieces."),
        face_type=WatchFaceType.VALENTINIANUS,
    ),
    WatchInfo(
        name="Concordia Felicitas",
        description=("The Concordia Felicitas features a unique reversible case originally designed for "
                     "polo players in the 1930s. This Art Deco masterpiece combines technical innovation "
                     "with timeless elegance, showcasing the brand's commitment to precision and craftsmanship."),
        face_type=WatchFaceType.CONCORDIA,
    ),
    WatchInfo(
        name="Jurgsen Zenithor",
        description=("The Jurgsen Zenithor, introduced in 1947, was one of the first modern diving watches. "
                     "With its distinctive black dial and luminous markers, it set the standard for dive "
                     "watches with features like water resistance, rotating bezel, and excellent legibility."),
        face_type=WatchFaceType.JURGSEN,
    ),
    WatchInfo(
        name="Horologia Romanum",
        description=("The Horologia Romanum features a clean dial design inspired by precision marine "
                     "chronometers. Known for its large case size and elegant simplicity, it represents "
                     "HR's commitment to technical excellence and timeless design."),
        face_type=WatchFaceType.HOROLOGIA,
    ),
    WatchInfo(
        name="Leonard Automatic Collection",
        description=("The Leonard Automatic showcases the brand's heritage of elegance and precision. With "
                     "its classic design featuring roman numerals and a moonphase display, it represents "
                     "Leonard's commitment to traditional watchmaking values and timeless aesthetics."),
        face_type=WatchFaceType.LEONARD,
    ),
    WatchInfo(
        name="山の時",
        description=("The 山の時 (Yama-no-Toki) collection represents the pinnacle of the brand's "
                     "watchmaking expertise. Featuring in-house movements and exquisite finishing, these "
                     "timepieces combine technical innovation with elegant design."),
        face_type=WatchFaceType.YAMA_NO_TOKI,
    ),
    WatchInfo(
        name="Constantinus Aureus Marine Chronometer",
        description=("The Constantinus Aureus Chronometer continues the brand's heritage of producing precise "
                     "marine chronometers for navigation. With its distinctive power reserve indicator and "
                     "date display, it combines traditional craftsmanship with modern innovation."),
        face_type=WatchFaceType.CONSTANTINUS,
    ),
    WatchInfo(
        name="Roma Marina",
        description=("The Roma Marina, first introduced in 1975, features an integrated bracelet and octagonal "
                     "bezel. With its distinctive hobnail pattern dial, it represents the brand's ability to "
                     "combine technical excellence with distinctive design elements."),
        face_type=WatchFaceType.ROMA_MARINA,
    ),
    WatchInfo(
        name="Kandinsky Evening",
        description=("The Kandinsky Evening watch face is inspired by Wassily Kandinsky's 'Circles in a "
                     "Circle' painting: a light background with colored circles of various sizes and "
                     "intersecting lines, celebrating the abstract art movement."),
        face_type=WatchFaceType.KANDINSKY,
    ),
    WatchInfo(
        name="Pontifex Chronometra",
        description=("The Pontifex Chronometra combines distinctive design elements with exceptional "
                     "craftsmanship. Founded in 1996, this independent Swiss manufacturer draws on "
                     "traditional techniques, with unique teardrop lugs and meticulously finished movements."),
        face_type=WatchFaceType.PONTIFEX,
    ),
    WatchInfo(
        name="Knot Urushi",
        description=("The Knot Urushi pairs modern watchmaking with traditional Japanese craftsmanship. Its "
                     "jet black dial is made with the Urushi lacquer technique and adorned with gold powder "
                     "that shimmers as light plays across the surface."),
        face_type=WatchFaceType.KNOT_URUSHI,
    ),
    WatchInfo(
        name="Centurio Luminor",
        description=("The Centurio Luminor is renowned for its minimalist design and signature fumé dial that "
                     "gradually darkens from center to edge. Founded in 1848, this independent Swiss "
                     "manufacturer combines traditional craftsmanship with contemporary aesthetics."),
        face_type=WatchFaceType.CENTURIO,
    ),
    WatchInfo(
        name="Chronomagus Regum",
        description=("The Chronomagus Regum is celebrated for its ultra-thin profile and minimalist design. "
                     "Since the 1950s, Chronomagus has been a pioneer in incredibly slim watches."),
        face_type=WatchFaceType.CHRONOMAGUS,
    ),
    WatchInfo(
        name="Aventinus Classique",
        description=("The Aventinus Classique embodies the timeless elegance of Jean-Louis Aventinus's "
                     "original designs, with its coin-edge case, guilloche dial and hollow moon-tipped hands."),
        face_type=WatchFaceType.AVENTINUS,
    ),
    WatchInfo(
        name="Lucerna Roma",
        description=("The Lucerna Roma features a distinctive tonneau (barrel) shape case and bold, colorful "
                     "numerals, combining avant-garde design with traditional Swiss watchmaking expertise."),
        face_type=WatchFaceType.LUCERNA,
    ),
    WatchInfo(
        name="Chant du Temps",
        description=("The Chant Du Temps exemplifies pure, minimalist elegance with its slim profile and clean "
                     "dial, a timeless dress watch from one of the oldest watch manufacturers."),
        face_type=WatchFaceType.CHANT_DU_TEMPS,
    ),
    WatchInfo(
        name="Грань Секунды",
        description=("The Грань Секунды combines classic design with complications like power reserve "
                     "indicators and chronographs. Founded in St. Petersburg in 1888, it represents Russian "
                     "watchmaking tradition."),
        face_type=WatchFaceType.EDGE_OF_SECOND,
    ),
    WatchInfo(
        name="Alpenglühen Zeitwerk",
        description=("The Alpenglühen Zeitwerk features a deep blue dial inspired by the Atlantic Ocean. This "
                     "German-made timepiece combines Bauhaus minimalism with dive watch functionality and a "
                     "distinctive red seconds hand."),
        face_type=WatchFaceType.ZEITWERK,
    ),
    WatchInfo(
        name="Vostok Military",
        description=("Vostok Military pays tribute to the rugged Amphibia watches produced for the Soviet and "
                     "Russian armed forces, with durable cases, a self-sealing caseback and bold utilitarian "
                     "dials."),
        face_type=WatchFaceType.VOSTOK,
    ),
)

_WATCHES_BY_NAME = {watch.name: watch for watch in ALL_WATCHES}


def watch_names():
    """Names of every watch, in catalog order."""
    return [watch.name for watch in ALL_WATCHES]


def find_watch(name):
    """Catalog entry for a name, or None."""
    return _WATCHES_BY_NAME.get(name)


def is_known_watch(name):
    return name in _WATCHES_BY_NAME


def require_watch(name):
    """
    Catalog entry for a name.

    Raises:
        ValueError: If no watch has that name
    """
    watch = find_watch(name)
    if watch is None:
        raise ValueError(f"Unknown watch: {name!r}")
    return watch
