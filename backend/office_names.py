# backend/office_names.py
# Arabic office name -> English display name (Cairo + Giza offices).
import logging
from types import MappingProxyType

log = logging.getLogger(__name__)

_OFFICE_NAMES_EN = {
    # Cairo offices
    "شبرا فرعي": "Shubra Branch",
    "القاهره الرئيسي": "Cairo Main Office",
    "الحي السادس - مدينة نصر": "Sixth District - Nasr City",
    "باب الخلق": "Bab El-Khalq",
    "السعوديه": "Al-Saudiya",
    "اسكر": "Askar",
    "الافضل": "Al-Afdal",
    "الحي الثاني - هليوبوليس": "Second District - Heliopolis",
    "بانوراما اكتوبر": "Panorama October",
    "القطاميه": "Al-Qatamiya",
    "ابو رواش": "Abu Rawash",
    "وحدة مرور حدائق الاهرام": "Giza Pyramids Traffic Unit",
    "مدينة نصر": "Nasr City",
    "المعادي": "Maadi",
    "حلوان": "Helwan",
    "مصر الجديدة": "Heliopolis",
    "الزمالك": "Zamalek",
    "المطرية": "Matariya",
    "عين شمس": "Ain Shams",
    "الزيتون": "El-Zeitoun",
    "السيدة زينب": "Sayeda Zeinab",
    "الموسكي": "El-Mousky",
    "العتبة": "Ataba",
    "رمسيس": "Ramses",
    "الدقي": "Dokki",
    "المهندسين": "Mohandessin",
    "الزاوية الحمراء": "Zawya El-Hamra",
    "روض الفرج": "Rod El-Farag",
    "الساحل": "El-Sahel",
    "حدائق القبة": "Hadayek El-Qobba",
    "الوايلي": "El-Wayli",
    "منشية ناصر": "Manshiet Nasser",
    "البساتين": "El-Basatin",
    "دار السلام": "Dar El-Salam",
    "المرج": "El-Marg",
    "عزبة النخل": "Ezbet El-Nakhl",
    "التبين": "El-Tabbin",
    "15 مايو": "15 May City",
    "القاهرة الجديدة": "New Cairo",
    "التجمع الخامس": "Fifth Settlement",
    "الرحاب": "El-Rehab",
    "مدينتي": "Madinaty",
    "الشروق": "El-Shorouk",

    # Giza offices
    "الجيزة": "Giza",
    "الهرم": "Haram",
    "فيصل": "Faisal",
    "العمرانية": "Omraneya",
    "بولاق الدكرور": "Bolaq El-Dakrour",
    "الوراق": "El-Warraq",
    "امبابة": "Imbaba",
    "كرداسة": "Kerdasa",
    "اوسيم": "Ausim",
    "البدرشين": "El-Badrashein",
    "الصف": "El-Saff",
    "اطفيح": "Atfih",
    "العياط": "El-Ayat",
    "الحوامدية": "El-Hawamdiya",
    "منشأة القناطر": "Manshaat El-Qanater",
    "6 اكتوبر": "6th of October City",
    "الشيخ زايد": "Sheikh Zayed",
    "حدائق الاهرام": "Hadayek El-Ahram",
    "المنيب": "El-Mounib",
    "الطالبية": "Talbeya",
    "الجيزة الجديدة": "New Giza",
    "المريوطية": "Marioutiya",
    "ترسا": "Tersa",
    "الباويطي": "El-Bawiti",
    "الفرافرة": "El-Farafra",
}

# read-only view shared by every caller
OFFICE_NAMES_EN = MappingProxyType(_OFFICE_NAMES_EN)

SOURCE_LOCALE = "ar"


def _lookup_en(arabic_name: str):
    """Return the English name for the trimmed key, or None if unknown."""
    return OFFICE_NAMES_EN.get(arabic_name.strip()) or None


def has_english_translation(arabic_name) -> bool:
    """
    True if the office name (after trimming) has an English translation.
    Empty / None input is simply "no translation".
    """
    if not arabic_name:
        return False
    return _lookup_en(arabic_name) is not None


def translate_office_name(arabic_name, locale):
    """
    Display name of an office for the given locale.

    - locale "ar" or empty input -> input returned as-is (no trimming).
    - any other locale -> English name if known, otherwise the ORIGINAL
      untrimmed input (not the trimmed one).
    """
    if locale == SOURCE_LOCALE or not arabic_name:
        return arabic_name

    english = _lookup_en(arabic_name)
    if english is None:
        log.debug("No English name for office %r", arabic_name)
        return arabic_name
    return english


def list_offices(locale) -> list:
    """All known offices in table order, with their display name for `locale`."""
    return [
        {"name": name, "display_name": translate_office_name(name, locale)}
        for name in OFFICE_NAMES_EN
    ]
