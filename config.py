"""
Configuration file for the Plant Match storefront core
"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Firebase / persistence
FIREBASE_CREDENTIALS_PATH = os.getenv("FIREBASE_CREDENTIALS_PATH")
FIREBASE_CREDENTIALS_JSON = os.getenv("FIREBASE_CREDENTIALS_JSON")
RESERVATIONS_COLLECTION = os.getenv("RESERVATIONS_COLLECTION", "reservations")

# API
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if origin.strip()
]

# Geocoding (OpenStreetMap Nominatim, requires a User-Agent)
GEOCODER_URL = "https://nominatim.openstreetmap.org/search"
GEOCODER_USER_AGENT = os.getenv("GEOCODER_USER_AGENT", "PlantMatch/1.0")
GEOCODER_TIMEOUT = 5

# Fulfillment rules
DELIVERY_RADIUS_KM = 15.0
RESERVATION_HOLD_HOURS = 48
LOW_STOCK_THRESHOLD = 5

# Pickup availability
PICKUP_DAYS_AHEAD = 7
PICKUP_TIME_WINDOWS = [
    "10:00 AM - 11:00 AM",
    "11:00 AM - 12:00 PM",
    "12:00 PM - 1:00 PM",
    "2:00 PM - 3:00 PM",
    "3:00 PM - 4:00 PM",
    "4:00 PM - 5:00 PM",
    "5:00 PM - 6:00 PM",
]

# Match engine thresholds (fraction of the highest score)
DEFAULT_THRESHOLD_RATIO = 0.7
EXPERT_THRESHOLD_RATIO = 0.5

# Answer that marks an experienced plant parent: (question id, option value)
EXPERT_SIGNAL = ("experience", "expert")

# Mock plant catalog (prices in INR)
MOCK_PLANT_PROFILES = {
    "snake": {
        "name": "Snake Plant (Sansevieria)",
        "subtitle": "The Indestructible Survivor",
        "description": "Perfect for busy lifestyles and low-light spaces. This plant thrives on neglect and purifies air while you sleep.",
        "care": "Water every 2-3 weeks, tolerates low light, very low maintenance",
        "personality": "Independent, resilient, and reliable - just like you!",
        "tips": ["Place anywhere with minimal light", "Water only when soil is completely dry", "Great for bedrooms"],
        "difficulty": 1,
        "price": 799.0,
    },
    "pothos": {
        "name": "Golden Pothos",
        "subtitle": "The Adaptable Friend",
        "description": "A versatile trailing plant that adapts to various conditions and grows quickly to fill your space with green.",
        "care": "Water weekly, bright indirect light preferred, very forgiving",
        "personality": "Flexible, easy-going, and always growing!",
        "tips": ["Trails beautifully from shelves", "Can grow in water or soil", "Trim to encourage bushier growth"],
        "difficulty": 2,
        "price": 599.0,
    },
    "succulent": {
        "name": "Succulent Collection",
        "subtitle": "The Minimalist's Dream",
        "description": "Beautiful, sculptural plants that store water in their leaves. Perfect for bright spaces and busy schedules.",
        "care": "Water every 2-4 weeks, needs bright light, drought tolerant",
        "personality": "Self-sufficient, unique, and beautifully low-key!",
        "tips": ["Use well-draining soil", "Perfect for sunny windowsills", "Many varieties to collect"],
        "difficulty": 1,
        "price": 399.0,
    },
    "fiddle": {
        "name": "Fiddle Leaf Fig",
        "subtitle": "The Statement Maker",
        "description": "A stunning tree-like plant with large, violin-shaped leaves that creates a dramatic focal point in any room.",
        "care": "Water when top soil is dry, bright indirect light, needs consistency",
        "personality": "Bold, elegant, and definitely Instagram-worthy!",
        "tips": ["Keep away from drafts", "Wipe leaves regularly", "Rotate for even growth"],
        "difficulty": 4,
        "price": 1299.0,
    },
    "monstera": {
        "name": "Monstera Deliciosa",
        "subtitle": "The Trendy Giant",
        "description": "Famous for its split leaves and impressive size. A fast-growing conversation starter that loves to climb.",
        "care": "Water weekly, bright indirect light, provide support for climbing",
        "personality": "Social, dramatic, and always making a statement!",
        "tips": ["Provide a moss pole for climbing", "Mist occasionally for humidity", "Prune to control size"],
        "difficulty": 3,
        "price": 999.0,
    },
    "spider": {
        "name": "Spider Plant",
        "subtitle": "The Generous Parent",
        "description": "A classic houseplant that produces adorable baby plants you can share with friends. Great for hanging baskets.",
        "care": "Water regularly, bright indirect light, produces plantlets",
        "personality": "Nurturing, prolific, and loves to share the joy!",
        "tips": ["Hang for cascading effect", "Baby plants can be propagated", "Great air purifier"],
        "difficulty": 2,
        "price": 699.0,
    },
    "rubber": {
        "name": "Rubber Plant",
        "subtitle": "The Steady Companion",
        "description": "A robust plant with glossy, dark green leaves that grows into an impressive indoor tree with proper care.",
        "care": "Water when soil is dry, bright indirect light, wipe leaves clean",
        "personality": "Reliable, sturdy, and grows with you over time!",
        "tips": ["Can grow quite tall", "Prune to maintain shape", "Glossy leaves love humidity"],
        "difficulty": 2,
        "price": 899.0,
    },
    "orchid": {
        "name": "Orchid",
        "subtitle": "The Elegant Challenge",
        "description": "Sophisticated and beautiful flowering plant. Requires specific care but rewards you with stunning, long-lasting blooms.",
        "care": "Water with ice cubes weekly, bright indirect light, high humidity",
        "personality": "Refined, particular, and absolutely stunning when happy!",
        "tips": ["Use ice cubes for gradual watering", "Needs good air circulation", "Blooms can last months"],
        "difficulty": 5,
        "price": 1599.0,
    },
    "herb": {
        "name": "Herb Garden",
        "subtitle": "The Practical Gardener's Choice",
        "description": "Fresh basil, mint, rosemary, or cilantro at your fingertips. Functional, fragrant, and delicious!",
        "care": "Water frequently, needs direct sunlight, harvest regularly",
        "personality": "Practical, nurturing, and loves to be useful!",
        "tips": ["Pinch flowers to keep leaves tender", "Harvest often for best growth", "Start with easy herbs like basil"],
        "difficulty": 3,
        "price": 499.0,
    },
    "bonsai": {
        "name": "Bonsai Tree",
        "subtitle": "The Meditation Master",
        "description": "A living art form that requires patience, skill, and mindfulness. Perfect for those seeking a meditative hobby.",
        "care": "Daily attention, specific watering needs, pruning and shaping required",
        "personality": "Patient, artistic, and deeply contemplative!",
        "tips": ["Start with hardy species like Ficus", "Requires daily monitoring", "Pruning is an art form"],
        "difficulty": 5,
        "price": 2499.0,
    },
}

# Mock quiz bank, asked in this order
MOCK_QUIZ_QUESTIONS = [
    {
        "id": "lifestyle",
        "prompt": "How would you describe your lifestyle?",
        "options": [
            {"value": "busy", "text": "Always on the go - I need low maintenance everything",
             "points": {"succulent": 3, "snake": 3, "pothos": 1}},
            {"value": "routine", "text": "I love routines and daily care rituals",
             "points": {"fiddle": 2, "monstera": 2, "orchid": 3, "herb": 2}},
            {"value": "flexible", "text": "Somewhere in between - I can adapt",
             "points": {"pothos": 3, "rubber": 2, "spider": 2}},
            {"value": "nurturing", "text": "I love taking care of living things",
             "points": {"orchid": 3, "herb": 3, "fiddle": 2, "bonsai": 3}},
        ],
    },
    {
        "id": "space",
        "prompt": "What kind of space do you have?",
        "options": [
            {"value": "small", "text": "Tiny apartment or limited space",
             "points": {"succulent": 3, "herb": 2, "spider": 1}},
            {"value": "medium", "text": "Decent space with some room to grow",
             "points": {"pothos": 2, "rubber": 2, "snake": 2, "orchid": 1}},
            {"value": "large", "text": "Spacious with room for statement plants",
             "points": {"fiddle": 3, "monstera": 3, "rubber": 2}},
            {"value": "outdoor", "text": "I have outdoor space too",
             "points": {"herb": 3, "succulent": 2, "bonsai": 2}},
        ],
    },
    {
        "id": "light",
        "prompt": "How much natural light does your space get?",
        "options": [
            {"value": "low", "text": "Pretty dim - north-facing or few windows",
             "points": {"snake": 3, "pothos": 2, "spider": 1}},
            {"value": "medium", "text": "Decent light but not direct sun",
             "points": {"pothos": 3, "rubber": 2, "orchid": 2}},
            {"value": "bright", "text": "Lots of bright, indirect light",
             "points": {"fiddle": 3, "monstera": 2, "spider": 3}},
            {"value": "direct", "text": "Direct sunlight for several hours",
             "points": {"succulent": 3, "herb": 3, "bonsai": 2}},
        ],
    },
    {
        "id": "experience",
        "prompt": "What's your plant parenting experience?",
        "options": [
            {"value": "beginner", "text": "Total beginner - I've killed cacti",
             "points": {"snake": 3, "pothos": 3, "succulent": 2}},
            {"value": "some", "text": "I've kept a few plants alive",
             "points": {"rubber": 2, "spider": 3, "herb": 2}},
            {"value": "intermediate", "text": "Pretty confident with most plants",
             "points": {"monstera": 2, "fiddle": 2, "orchid": 1, "bonsai": 1}},
            {"value": "expert", "text": "Green thumb - bring on the challenge!",
             "points": {"orchid": 3, "bonsai": 3, "fiddle": 2}},
        ],
    },
    {
        "id": "watering",
        "prompt": "How do you feel about watering schedules?",
        "options": [
            {"value": "forget", "text": "I often forget to water things",
             "points": {"succulent": 3, "snake": 3}},
            {"value": "reminder", "text": "I need reminders but can stick to them",
             "points": {"pothos": 2, "rubber": 2, "spider": 2}},
            {"value": "regular", "text": "I can maintain a regular schedule",
             "points": {"monstera": 2, "fiddle": 2, "herb": 2}},
            {"value": "attentive", "text": "I love checking soil and adjusting care",
             "points": {"orchid": 3, "bonsai": 3, "herb": 2}},
        ],
    },
    {
        "id": "purpose",
        "prompt": "What do you want from your plant?",
        "options": [
            {"value": "decoration", "text": "Beautiful decoration for my space",
             "points": {"fiddle": 2, "monstera": 2, "orchid": 2}},
            {"value": "air", "text": "Clean air and wellness benefits",
             "points": {"snake": 2, "spider": 3, "pothos": 2, "rubber": 2}},
            {"value": "food", "text": "Something I can use in cooking",
             "points": {"herb": 3}},
            {"value": "meditation", "text": "A calming, mindful hobby",
             "points": {"bonsai": 3, "orchid": 2, "succulent": 1}},
            {"value": "easy", "text": "Just something green that won't die",
             "points": {"snake": 3, "pothos": 3, "succulent": 2}},
        ],
    },
]

# Logging configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
