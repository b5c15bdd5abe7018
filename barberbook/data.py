# barberbook/data.py

shop_settings = {
    "open_time": "09:00",
    "close_time": "18:00",
    "slot_minutes": 30,
}

DEFAULT_BARBERS = [
    {
        "name": "John Doe",
        "title": "Senior Barber",
        "experience": "8 years exp",
        "rating": "4.9 (127 reviews)",
        "avatar": "JD",
    },
    {
        "name": "Mike Smith",
        "title": "Master Barber",
        "experience": "12 years exp",
        "rating": "4.8 (203 reviews)",
        "avatar": "MS",
    },
    {
        "name": "Alex Johnson",
        "title": "Specialist",
        "experience": "6 years exp",
        "rating": "4.7 (89 reviews)",
        "avatar": "AJ",
    },
    {
        "name": "Carlos Rivera",
        "title": "Style Expert",
        "experience": "10 years exp",
        "rating": "4.9 (156 reviews)",
        "avatar": "CR",
    },
]

# price is in cents
DEFAULT_SERVICES = [
    {"name": "Classic Haircut", "duration": 30, "price": 2500},
    {"name": "Haircut + Beard", "duration": 45, "price": 4000},
    {"name": "Premium Package", "duration": 60, "price": 6000},
    {"name": "Beard Trim", "duration": 20, "price": 1500},
]
