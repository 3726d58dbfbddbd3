"""
Static SKU catalog and seed seller directory.
"""
from typing import Any, Dict, List

SKU_CATALOG: List[Dict[str, Any]] = [
    # Kite Glow
    {"id": "kg-10", "name": "Kite Rs 10", "category": "Kite Glow", "units_per_carton": 144, "units_per_dozen": 12, "price_per_carton": 1440},
    {"id": "kg-20", "name": "Kite Rs 20", "category": "Kite Glow", "units_per_carton": 96, "units_per_dozen": 12, "price_per_carton": 1920},
    {"id": "kg-50", "name": "Kite Rs 50", "category": "Kite Glow", "units_per_carton": 48, "units_per_dozen": 12, "price_per_carton": 2400},
    {"id": "kg-99", "name": "Kite Rs 99", "category": "Kite Glow", "units_per_carton": 24, "units_per_dozen": 12, "price_per_carton": 2376},
    {"id": "kg-05kg", "name": "Kite 0.5kg", "category": "Kite Glow", "units_per_carton": 24, "units_per_dozen": 0, "price_per_carton": 3600},
    {"id": "kg-1kg", "name": "Kite 1kg", "category": "Kite Glow", "units_per_carton": 12, "units_per_dozen": 0, "price_per_carton": 3600},
    {"id": "kg-2kg", "name": "Kite 2kg", "category": "Kite Glow", "units_per_carton": 6, "units_per_dozen": 0, "price_per_carton": 3600},

    # Burq Action
    {"id": "ba-10", "name": "Burq Rs 10", "category": "Burq Action", "units_per_carton": 204, "units_per_dozen": 12, "price_per_carton": 2040},
    {"id": "ba-20", "name": "Burq Rs 20", "category": "Burq Action", "units_per_carton": 96, "units_per_dozen": 12, "price_per_carton": 1920},
    {"id": "ba-50", "name": "Burq Rs 50", "category": "Burq Action", "units_per_carton": 48, "units_per_dozen": 12, "price_per_carton": 2400},
    {"id": "ba-99", "name": "Burq Rs 99", "category": "Burq Action", "units_per_carton": 24, "units_per_dozen": 12, "price_per_carton": 2376},
    {"id": "ba-1kg", "name": "Burq 1kg", "category": "Burq Action", "units_per_carton": 12, "units_per_dozen": 0, "price_per_carton": 3600},
    {"id": "ba-23kg", "name": "Burq 2.3kg", "category": "Burq Action", "units_per_carton": 6, "units_per_dozen": 0, "price_per_carton": 3600},

    # Vero
    {"id": "v-5kg", "name": "Vero 5kg", "category": "Vero", "units_per_carton": 4, "units_per_dozen": 0, "price_per_carton": 4000},
    {"id": "v-20kg", "name": "Vero 20kg", "category": "Vero", "units_per_carton": 1, "units_per_dozen": 0, "price_per_carton": 16000},

    # DWB
    {"id": "dwb-reg", "name": "Regular", "category": "DWB", "units_per_carton": 48, "units_per_dozen": 12, "price_per_carton": 4800},
    {"id": "dwb-large", "name": "Large", "category": "DWB", "units_per_carton": 36, "units_per_dozen": 12, "price_per_carton": 5400},
    {"id": "dwb-long", "name": "Long Bar", "category": "DWB", "units_per_carton": 36, "units_per_dozen": 12, "price_per_carton": 5400},
    {"id": "dwb-super", "name": "Super Bar", "category": "DWB", "units_per_carton": 36, "units_per_dozen": 12, "price_per_carton": 5400},
    {"id": "dwb-new", "name": "New DWB", "category": "DWB", "units_per_carton": 36, "units_per_dozen": 12, "price_per_carton": 5400},

    # Match
    {"id": "m-large", "name": "Large", "category": "Match", "units_per_carton": 10, "units_per_dozen": 12, "price_per_carton": 1000},
    {"id": "m-classic", "name": "Classic", "category": "Match", "units_per_carton": 10, "units_per_dozen": 12, "price_per_carton": 1000},
    {"id": "m-regular", "name": "Regular", "category": "Match", "units_per_carton": 20, "units_per_dozen": 12, "price_per_carton": 2000},
    {"id": "m-slim", "name": "Slim", "category": "Match", "units_per_carton": 20, "units_per_dozen": 12, "price_per_carton": 2000},
]


def _seller(name, contact, town, distributor, tsm, total_shops):
    return {
        "name": name,
        "contact": contact,
        "town": town,
        "distributor": distributor,
        "tsm": tsm,
        "total_shops": total_shops,
        "routes": ["Route 1"]
    }


# Loaded into an empty database and on reseed
SEED_SELLERS: List[Dict[str, Any]] = [
    # Peshawar
    _seller("Muhammad Bilal", "P-01", "Peshawar", "Peshawar Dist", "Muhammad Shoaib", 45),
    _seller("Khizar Hayat", "P-02", "Peshawar", "Peshawar Dist", "Muhammad Shoaib", 40),
    _seller("Adil Khan", "P-03", "Peshawar", "Peshawar Dist", "Muhammad Shoaib", 50),
    _seller("Baidar Khan", "P-04", "Peshawar", "Peshawar Dist", "Muhammad Shoaib", 42),
    _seller("Muhammad Usman", "P-05", "Peshawar", "Peshawar Dist", "Muhammad Shoaib", 48),
    _seller("Ghulam Rasool", "P-06", "Peshawar", "Peshawar Dist", "Muhammad Shoaib", 44),
    _seller("Khalid Awan", "P-07", "Peshawar", "Peshawar Dist", "Muhammad Shoaib", 46),

    # Haripur and Taxila
    _seller("Shahid", "H-01", "Haripur", "Haripur Dist", "Muhammad Yousaf", 35),
    _seller("Shahrukh", "H-02", "Haripur", "Haripur Dist", "Muhammad Yousaf", 38),
    _seller("Bilal", "T-01", "Taxila", "Taxila Dist", "Muhammad Yousaf", 40),
    _seller("Muneeb", "T-02", "Taxila", "Taxila Dist", "Muhammad Yousaf", 42),

    # Kohat, Hangu and Attock
    _seller("Kashif", "K-01", "Kohat", "Kohat Dist", "Noman Paracha", 55),
    _seller("Bilal", "HG-01", "Hangu", "Hangu Dist", "Noman Paracha", 50),
    _seller("Usama", "A-01", "Attock", "Attock Dist", "Noman Paracha", 45),

    # Charsadda
    _seller("Babar", "C-01", "Charsadda", "Charsadda Dist", "Waheed Jamal", 48),

    # Mardan
    _seller("Muhammad Amir", "M-01", "Mardan", "Mardan Dist", "Muhammad Zeeshan", 52),

    # DI Khan and Bannu
    _seller("Zakaullah", "DI-01", "DI Khan", "DI Khan Dist", "Ikramullah", 48),
    _seller("Muntazir", "DI-02", "DI Khan", "DI Khan Dist", "Ikramullah", 45),
    _seller("OB Bannu", "BAN-01", "Bannu", "Bannu Dist", "Ikramullah", 40),

    # Muzaffarabad and Mansehra
    _seller("OB Muzaffarabad", "MUZ-01", "Muzaffarabad", "Muz Dist", "Qaisar Yousaf", 40),
    _seller("OB Mansehra", "MAN-01", "Mansehra", "Man Dist", "Qaisar Yousaf", 40),
]
