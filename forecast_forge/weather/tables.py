"""
Built-in weather tables.

- climate tables: d100 roll ranges per climate and season, listed from the
  harshest condition at index 0 toward the calmest
- temperature ranges (°F) per climate, season and condition
- wind speed ranges (mph), wind intensity tiers, diurnal offsets
- persistence rules (energy DC, growth, regression target)
- gameplay effects text for the table

A project can override any of these with JSON files (see ``climate.py``).
"""

SEASONS = ["winter", "spring", "summer", "fall"]

WIND_DIRECTIONS = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]

DEFAULT_CLIMATE = "temperate-deciduous"

# UI biome name -> climate table key
BIOME_MAP = {
    "temperate": "temperate-deciduous",
    "desert": "desert",
    "arctic": "tundra",
    "tropical": "tropical-rainforest",
    "coastal": "temperate-rainforest",
    "mountain": "boreal-forest",
    "forest": "temperate-deciduous",
    "swamp": "tropical-seasonal",
}

# (condition, roll min, roll max)
CLIMATE_TABLES = {
    "tropical-rainforest": {
        "winter": [
            ("Thunderstorm", 1, 20), ("Heavy Rain", 21, 50), ("Rain", 51, 75),
            ("Light Clouds", 76, 90), ("Clear Skies", 91, 100),
        ],
        "spring": [
            ("Thunderstorm", 1, 15), ("Heavy Rain", 16, 35), ("Rain", 36, 65),
            ("Light Clouds", 66, 85), ("Clear Skies", 86, 100),
        ],
        "summer": [
            ("Thunderstorm", 1, 10), ("Rain", 11, 25), ("Light Clouds", 26, 60),
            ("Clear Skies", 61, 95), ("High Humidity Haze", 96, 100),
        ],
        "fall": [
            ("Thunderstorm", 1, 15), ("Heavy Rain", 16, 40), ("Rain", 41, 65),
            ("Light Clouds", 66, 85), ("Clear Skies", 86, 100),
        ],
    },
    "tropical-seasonal": {
        "winter": [
            ("Thunderstorm", 1, 5), ("Rain", 6, 15), ("Light Clouds", 16, 45),
            ("Clear Skies", 46, 90), ("Scorching Heat", 91, 100),
        ],
        "spring": [
            ("Thunderstorm", 1, 10), ("Rain", 11, 25), ("Light Clouds", 26, 50),
            ("Clear Skies", 51, 80), ("High Winds", 81, 100),
        ],
        "summer": [
            ("Thunderstorm", 1, 20), ("Heavy Rain", 21, 40), ("Rain", 41, 65),
            ("Light Clouds", 66, 85), ("Clear Skies", 86, 100),
        ],
        "fall": [
            ("Thunderstorm", 1, 10), ("Rain", 11, 25), ("Light Clouds", 26, 55),
            ("Clear Skies", 56, 85), ("High Winds", 86, 100),
        ],
    },
    "desert": {
        "winter": [
            ("Rain", 1, 5), ("Light Clouds", 6, 15), ("Clear Skies", 16, 70),
            ("Cold Winds", 71, 95), ("Freezing Cold", 96, 100),
        ],
        "spring": [
            ("Rain", 1, 10), ("Light Clouds", 11, 25), ("Clear Skies", 26, 70),
            ("High Winds", 71, 90), ("Scorching Heat", 91, 100),
        ],
        "summer": [
            ("Thunderstorm", 1, 2), ("Rain", 3, 10), ("Light Clouds", 11, 30),
            ("Clear Skies", 31, 80), ("Scorching Heat", 81, 100),
        ],
        "fall": [
            ("Rain", 1, 5), ("Light Clouds", 6, 25), ("Clear Skies", 26, 75),
            ("High Winds", 76, 95), ("Scorching Heat", 96, 100),
        ],
    },
    "temperate-grassland": {
        "winter": [
            ("Blizzard", 1, 5), ("Snow", 6, 20), ("Freezing Cold", 21, 40),
            ("Heavy Clouds", 41, 60), ("Light Clouds", 61, 85), ("Clear Skies", 86, 100),
        ],
        "spring": [
            ("Thunderstorm", 1, 10), ("Rain", 11, 30), ("Light Clouds", 31, 50),
            ("Clear Skies", 51, 75), ("High Winds", 76, 95), ("Scorching Heat", 96, 100),
        ],
        "summer": [
            ("Thunderstorm", 1, 5), ("Rain", 6, 20), ("Light Clouds", 21, 40),
            ("Clear Skies", 41, 80), ("High Winds", 81, 95), ("Scorching Heat", 96, 100),
        ],
        "fall": [
            ("Thunderstorm", 1, 5), ("Rain", 6, 15), ("Heavy Clouds", 16, 30),
            ("Light Clouds", 31, 55), ("Clear Skies", 56, 80), ("High Winds", 81, 100),
        ],
    },
    "temperate-deciduous": {
        "winter": [
            ("Blizzard", 1, 5), ("Snow", 6, 15), ("Freezing Cold", 16, 35),
            ("Heavy Clouds", 36, 55), ("Light Clouds", 56, 80), ("Clear Skies", 81, 100),
        ],
        "spring": [
            ("Thunderstorm", 1, 10), ("Rain", 11, 30), ("Light Clouds", 31, 50),
            ("Clear Skies", 51, 80), ("High Winds", 81, 95), ("Scorching Heat", 96, 100),
        ],
        "summer": [
            ("Thunderstorm", 1, 5), ("Rain", 6, 20), ("Light Clouds", 21, 45),
            ("Clear Skies", 46, 85), ("Scorching Heat", 86, 100),
        ],
        "fall": [
            ("Thunderstorm", 1, 5), ("Rain", 6, 20), ("Heavy Clouds", 21, 35),
            ("Light Clouds", 36, 60), ("Clear Skies", 61, 85), ("High Winds", 86, 100),
        ],
    },
    "temperate-rainforest": {
        "winter": [
            ("Heavy Rain", 1, 10), ("Rain", 11, 30), ("Light Clouds", 31, 50),
            ("Heavy Clouds", 51, 75), ("Clear Skies", 76, 100),
        ],
        "spring": [
            ("Thunderstorm", 1, 10), ("Heavy Rain", 11, 25), ("Rain", 26, 45),
            ("Light Clouds", 46, 70), ("Clear Skies", 71, 90), ("High Winds", 91, 100),
        ],
        "summer": [
            ("Thunderstorm", 1, 5), ("Heavy Rain", 6, 15), ("Rain", 16, 35),
            ("Light Clouds", 36, 60), ("Clear Skies", 61, 90), ("Scorching Heat", 91, 100),
        ],
        "fall": [
            ("Thunderstorm", 1, 10), ("Heavy Rain", 11, 25), ("Rain", 26, 40),
            ("Light Clouds", 41, 65), ("Heavy Clouds", 66, 85), ("Clear Skies", 86, 100),
        ],
    },
    "boreal-forest": {
        "winter": [
            ("Blizzard", 1, 10), ("Snow", 11, 30), ("Freezing Cold", 31, 50),
            ("Heavy Clouds", 51, 70), ("Light Clouds", 71, 85), ("Clear Skies", 86, 100),
        ],
        "spring": [
            ("Snow", 1, 10), ("Freezing Cold", 11, 20), ("Rain", 21, 35),
            ("Heavy Clouds", 36, 50), ("Light Clouds", 51, 70), ("Clear Skies", 71, 90),
            ("High Winds", 91, 100),
        ],
        "summer": [
            ("Thunderstorm", 1, 5), ("Rain", 6, 15), ("Light Clouds", 16, 35),
            ("Clear Skies", 36, 75), ("High Winds", 76, 95), ("Scorching Heat", 96, 100),
        ],
        "fall": [
            ("Snow", 1, 10), ("Rain", 11, 25), ("Heavy Clouds", 26, 40),
            ("Light Clouds", 41, 65), ("Clear Skies", 66, 90), ("High Winds", 91, 100),
        ],
    },
    "tundra": {
        "winter": [
            ("Blizzard", 1, 15), ("Snow", 16, 35), ("Freezing Cold", 36, 60),
            ("Heavy Clouds", 61, 80), ("Light Clouds", 81, 95), ("Clear Skies", 96, 100),
        ],
        "spring": [
            ("Snow", 1, 10), ("Freezing Cold", 11, 30), ("Heavy Clouds", 31, 50),
            ("Light Clouds", 51, 70), ("Clear Skies", 71, 90), ("High Winds", 91, 100),
        ],
        "summer": [
            ("Rain", 1, 5), ("Light Clouds", 6, 20), ("Clear Skies", 21, 60),
            ("High Winds", 61, 85), ("Cold Snap", 86, 100),
        ],
        "fall": [
            ("Snow", 1, 15), ("Freezing Cold", 16, 30), ("Heavy Clouds", 31, 50),
            ("Light Clouds", 51, 70), ("Clear Skies", 71, 90), ("High Winds", 91, 100),
        ],
    },
}

# climate -> season -> condition -> (min °F, max °F)
TEMPERATURE_RANGES = {
    "tropical-rainforest": {
        "winter": {
            "Thunderstorm": (70, 85), "Heavy Rain": (72, 88), "Rain": (75, 90),
            "Light Clouds": (78, 92), "Clear Skies": (80, 95), "High Humidity Haze": (82, 98),
        },
        "spring": {
            "Thunderstorm": (72, 88), "Heavy Rain": (75, 90), "Rain": (78, 92),
            "Light Clouds": (80, 95), "Clear Skies": (82, 98),
        },
        "summer": {
            "Thunderstorm": (75, 90), "Rain": (78, 92), "Light Clouds": (80, 95),
            "Clear Skies": (82, 100), "High Humidity Haze": (85, 102),
        },
        "fall": {
            "Thunderstorm": (72, 88), "Heavy Rain": (75, 90), "Rain": (77, 92),
            "Light Clouds": (78, 94), "Clear Skies": (80, 96),
        },
    },
    "tropical-seasonal": {
        "winter": {
            "Thunderstorm": (65, 85), "Rain": (68, 88), "Light Clouds": (70, 90),
            "Clear Skies": (72, 95), "Scorching Heat": (85, 105),
        },
        "spring": {
            "Thunderstorm": (70, 90), "Rain": (72, 92), "Light Clouds": (75, 95),
            "Clear Skies": (78, 98), "High Winds": (75, 100),
        },
        "summer": {
            "Thunderstorm": (75, 95), "Heavy Rain": (78, 98), "Rain": (80, 100),
            "Light Clouds": (82, 102), "Clear Skies": (85, 105),
        },
        "fall": {
            "Thunderstorm": (70, 90), "Rain": (72, 92), "Light Clouds": (75, 95),
            "Clear Skies": (78, 98), "High Winds": (75, 95),
        },
    },
    "desert": {
        "winter": {
            "Rain": (40, 60), "Light Clouds": (45, 65), "Clear Skies": (50, 70),
            "Cold Winds": (35, 55), "Freezing Cold": (20, 45),
        },
        "spring": {
            "Rain": (55, 75), "Light Clouds": (60, 80), "Clear Skies": (65, 90),
            "High Winds": (60, 85), "Scorching Heat": (85, 105),
        },
        "summer": {
            "Thunderstorm": (75, 95), "Rain": (80, 100), "Light Clouds": (85, 105),
            "Clear Skies": (90, 115), "Scorching Heat": (100, 125),
        },
        "fall": {
            "Rain": (60, 80), "Light Clouds": (65, 85), "Clear Skies": (70, 90),
            "High Winds": (65, 85), "Scorching Heat": (85, 105),
        },
    },
    "temperate-grassland": {
        "winter": {
            "Blizzard": (5, 25), "Snow": (10, 30), "Freezing Cold": (15, 35),
            "Heavy Clouds": (25, 40), "Light Clouds": (30, 45), "Clear Skies": (25, 40),
        },
        "spring": {
            "Thunderstorm": (45, 65), "Rain": (50, 70), "Light Clouds": (55, 75),
            "Clear Skies": (60, 80), "High Winds": (55, 75), "Scorching Heat": (75, 95),
        },
        "summer": {
            "Thunderstorm": (65, 85), "Rain": (70, 90), "Light Clouds": (75, 95),
            "Clear Skies": (80, 100), "High Winds": (75, 95), "Scorching Heat": (90, 110),
        },
        "fall": {
            "Thunderstorm": (50, 70), "Rain": (45, 65), "Heavy Clouds": (40, 60),
            "Light Clouds": (45, 65), "Clear Skies": (50, 70), "High Winds": (45, 65),
        },
    },
    "temperate-deciduous": {
        "winter": {
            "Blizzard": (10, 25), "Snow": (15, 30), "Freezing Cold": (20, 35),
            "Heavy Clouds": (25, 40), "Light Clouds": (30, 45), "Clear Skies": (25, 40),
        },
        "spring": {
            "Thunderstorm": (50, 70), "Rain": (55, 75), "Light Clouds": (60, 80),
            "Clear Skies": (65, 85), "High Winds": (60, 80), "Scorching Heat": (80, 100),
        },
        "summer": {
            "Thunderstorm": (70, 90), "Rain": (75, 95), "Light Clouds": (80, 100),
            "Clear Skies": (85, 105), "Scorching Heat": (95, 115),
        },
        "fall": {
            "Thunderstorm": (50, 70), "Rain": (45, 65), "Heavy Clouds": (40, 60),
            "Light Clouds": (45, 65), "Clear Skies": (50, 70), "High Winds": (45, 65),
        },
    },
    "temperate-rainforest": {
        "winter": {
            "Heavy Rain": (35, 50), "Rain": (40, 55), "Light Clouds": (42, 58),
            "Heavy Clouds": (38, 52), "Clear Skies": (40, 55),
        },
        "spring": {
            "Thunderstorm": (45, 65), "Heavy Rain": (48, 68), "Rain": (50, 70),
            "Light Clouds": (52, 72), "Clear Skies": (55, 75), "High Winds": (50, 70),
        },
        "summer": {
            "Thunderstorm": (60, 80), "Heavy Rain": (62, 82), "Rain": (65, 85),
            "Light Clouds": (68, 88), "Clear Skies": (70, 90), "Scorching Heat": (80, 100),
        },
        "fall": {
            "Thunderstorm": (45, 65), "Heavy Rain": (42, 62), "Rain": (40, 60),
            "Light Clouds": (45, 65), "Heavy Clouds": (40, 60), "Clear Skies": (50, 70),
        },
    },
    "boreal-forest": {
        "winter": {
            "Blizzard": (-15, 10), "Snow": (-10, 15), "Freezing Cold": (-5, 20),
            "Heavy Clouds": (0, 25), "Light Clouds": (5, 30), "Clear Skies": (-5, 25),
        },
        "spring": {
            "Snow": (20, 40), "Freezing Cold": (25, 45), "Rain": (35, 55),
            "Heavy Clouds": (30, 50), "Light Clouds": (35, 55), "Clear Skies": (40, 60),
            "High Winds": (35, 55),
        },
        "summer": {
            "Thunderstorm": (55, 75), "Rain": (60, 80), "Light Clouds": (65, 85),
            "Clear Skies": (70, 90), "High Winds": (65, 85), "Scorching Heat": (80, 100),
        },
        "fall": {
            "Snow": (25, 45), "Rain": (30, 50), "Heavy Clouds": (25, 45),
            "Light Clouds": (30, 50), "Clear Skies": (35, 55), "High Winds": (30, 50),
        },
    },
    "tundra": {
        "winter": {
            "Blizzard": (-30, 0), "Snow": (-25, 5), "Freezing Cold": (-20, 10),
            "Heavy Clouds": (-15, 15), "Light Clouds": (-10, 20), "Clear Skies": (-20, 10),
        },
        "spring": {
            "Snow": (-5, 25), "Freezing Cold": (0, 30), "Heavy Clouds": (10, 35),
            "Light Clouds": (15, 40), "Clear Skies": (20, 45), "High Winds": (10, 35),
        },
        "summer": {
            "Rain": (35, 60), "Light Clouds": (40, 65), "Clear Skies": (45, 70),
            "High Winds": (40, 65), "Cold Snap": (30, 50),
        },
        "fall": {
            "Snow": (5, 30), "Freezing Cold": (0, 25), "Heavy Clouds": (10, 35),
            "Light Clouds": (15, 40), "Clear Skies": (20, 45), "High Winds": (10, 35),
        },
    },
}

# Offset in °F added to the base temperature, by hour of day
TIME_MODIFIERS = [
    -8, -9, -10, -11, -12, -11, -9, -6,   # 00-07
    -3, 0, 3, 6, 8, 9, 10, 10,            # 08-15
    8, 6, 3, 0, -3, -5, -6, -7,           # 16-23
]

# Clamp applied to generated temperatures so the condition stays plausible
TEMPERATURE_CONSTRAINTS = {
    "Snow": {"max": 32},
    "Blizzard": {"max": 30},
    "Freezing Cold": {"max": 32},
    "Scorching Heat": {"min": 90},
    "Cold Snap": {"max": 40},
}

WIND_SPEED_RANGES = {
    "Clear Skies": (0, 5),
    "Light Clouds": (2, 8),
    "Heavy Clouds": (5, 12),
    "Rain": (5, 15),
    "Heavy Rain": (10, 20),
    "Freezing Cold": (0, 10),
    "Snow": (5, 15),
    "Scorching Heat": (0, 5),
    "High Winds": (20, 40),
    "Cold Winds": (15, 30),
    "Thunderstorm": (15, 30),
    "Blizzard": (25, 50),
    "High Humidity Haze": (0, 5),
    "Cold Snap": (5, 15),
}

DEFAULT_WIND_RANGE = (0, 10)

# condition -> (base DC, DC increase per survived check, regresses to)
ENERGY_RULES = {
    "Clear Skies": (0, 0, None),
    "Light Clouds": (0, 0, "Clear Skies"),
    "Heavy Clouds": (10, 3, "Light Clouds"),
    "Rain": (10, 3, "Heavy Clouds"),
    "High Winds": (10, 3, "Light Clouds"),
    "Cold Winds": (10, 3, "Light Clouds"),
    "Thunderstorm": (12, 4, "Heavy Rain"),
    "Heavy Rain": (12, 4, "Rain"),
    "Blizzard": (12, 4, "Snow"),
    "Scorching Heat": (15, 5, "Clear Skies"),
    "Freezing Cold": (15, 5, "Heavy Clouds"),
    "Snow": (15, 5, "Freezing Cold"),
    "High Humidity Haze": (10, 3, "Clear Skies"),
    "Cold Snap": (15, 5, "Freezing Cold"),
}

# (tier, min mph, max mph, effect)
WIND_INTENSITY = [
    ("Calm", 0, 5,
     "Air is still or has very light breezes. No effect on gameplay."),
    ("Breezy", 6, 14,
     "Light wind that rustles leaves and can be felt on the face. No mechanical effects."),
    ("Windy", 15, 25,
     "Moderate wind that raises dust and loose paper. Small branches move. "
     "Flying creatures can still maneuver normally."),
    ("Strong Winds", 26, 39,
     "Strong wind creates whistling sounds. Small trees sway. Flying creatures gain +10 "
     "movement speed when moving with the wind, and -10 movement speed when moving against it. "
     "All ranged weapon attacks have a -2 to attack rolls."),
    ("Gale Force", 40, 54,
     "Large branches move, whistling is heard. Flying creatures have disadvantage on Dexterity "
     "checks. Range for thrown weapons and projectiles is halved when shooting into the wind. "
     "Small flying creatures must make a DC 15 Strength check to fly against the wind."),
    ("Storm Force", 55, 999,
     "Whole trees move, walking is difficult. Range for thrown weapons and projectiles is halved. "
     "All creatures have disadvantage on Perception checks that rely on hearing. Flying creatures "
     "must succeed on a DC 20 Strength check to fly against the wind or be pushed back 10 feet at "
     "the end of their turn. Small flying creatures cannot fly against the wind."),
]

WEATHER_EFFECTS = {
    "Clear Skies":
        "This is the game as you normally play it. Clear bright light during day time, view of "
        "the stars and moon at night. No modifiers are added to play.",
    "Light Clouds":
        "The sky is partially cloudy. High flying aerial creatures have partial cover, and outdoor "
        "light still counts as sunlight.",
    "Heavy Clouds":
        "The sky is blocked. High flying aerial creatures have total cover, and outdoor light does "
        "not count as sunlight (for the purposes of sunlight sensitivity and similar traits). "
        "Checks using Navigation Tools to determine your location based on celestial observation "
        "are made with disadvantage.",
    "Rain":
        "Unpleasant to travel in. If you have wagons, your travel pace is slowed by half. If you "
        "attempt to take a long rest without cover, you must make a DC 12 Constitution saving "
        "throw to gain the benefits of a long rest. All fire damage rolls have a -2.",
    "Heavy Rain":
        "Same as rain, but the DC becomes 16 to benefit from a long rest without shelter, and if "
        "Heavy Rain occurs two days in a row wagon travel becomes impossible until one day without "
        "rain occurs. May cause flooding. All fire damage rolls have a -4. Lightning and Cold "
        "damage rolls gain a +2.",
    "Freezing Cold":
        "If you attempt to take a long rest without cover and heat, you must make a DC 15 "
        "Constitution saving throw to gain the benefits of a long rest. If you fail by 5 or more, "
        "you gain an additional level of Exhaustion. All cold damage rolls have a +2.",
    "Snow":
        "Unpleasant to travel in. All travel speed is halved. If snow occurs for two days in a "
        "row, all terrain is difficult terrain and wagon travel is impossible until one day "
        "without snow passes. Also has the effect of Heavy Clouds and Freezing Cold.",
    "Scorching Heat":
        "Blistering heat that is unpleasant to travel in. Creatures that travel during daylight "
        "hours require twice the ration of water, and a creature that travels for 4 or more hours "
        "or engages in heavy activity for 1 or more hours during the day and does not immediately "
        "take a short or long rest under cover must make a DC 10 Constitution saving throw or "
        "gain a level of Exhaustion. All fire damage rolls have a +2. All cold damage rolls have "
        "a -2.",
    "High Winds":
        "Gusts tear across open ground. Ranged weapon attacks have disadvantage beyond normal "
        "range, open flames are extinguished, and flying creatures must land at the end of their "
        "turn or be pushed 10 feet downwind.",
    "Cold Winds":
        "Frigid blasts of air whip across the landscape. All creatures must make a DC 10 "
        "Constitution saving throw after each hour of travel or gain a level of exhaustion unless "
        "properly dressed for cold weather. Ranged attacks have disadvantage due to the wind.",
    "Thunderstorm":
        "Lightning flashes and thunder crashes. All creatures are partially obscured if they are "
        "more than 20 feet from you. If you travel for 4 or more hours during a Thunderstorm, "
        "roll a d20. On a 1, you are struck by a lightning bolt dealing 3d12 lightning damage. "
        "Lightning and Thunder damage rolls have a +2. Also has the effect of Rain, High Winds, "
        "Heavy Clouds.",
    "Blizzard":
        "At the end of every hour spent in a Blizzard, make a DC 12 Constitution saving throw. "
        "On failure, you take 3d4 cold damage and gain one level of exhaustion. You make this "
        "check with advantage if you have proper gear. All creatures are heavily obscured if they "
        "are more than 20 feet from you. All terrain is difficult terrain. Also has the effect of "
        "Snow, High Winds, and Freezing Cold.",
    "High Humidity Haze":
        "The air feels thick and oppressive. Constitution checks related to endurance or physical "
        "exertion are made with disadvantage. Water consumption is doubled for all creatures.",
    "Cold Snap":
        "An unseasonable cold spell. Creatures not accustomed to cold weather must make a DC 10 "
        "Constitution saving throw every 4 hours or gain a level of exhaustion. Plants may be "
        "damaged, affecting foraging attempts. Water sources may freeze over unexpectedly.",
}

CELESTIAL_EFFECTS = {
    "Shooting Star":
        "Shooting stars streak across the night sky. All creatures gain 1 luck point as per the "
        "Lucky feat, which lasts until used or the weather changes.",
    "Meteor Impact":
        "A blazing meteor crashes to earth somewhere within 1d100 miles! The ground trembles from "
        "the impact, and a bright flash illuminates the horizon. Rumors will soon spread of "
        "strange materials, valuable metals, or even magical properties at the impact site. Those "
        "who investigate may find rare resources worth 2d6 x 100 gp, but beware of others seeking "
        "the same prize or strange effects near the impact zone.",
}
