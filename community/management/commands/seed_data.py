user_fixtures = [
    {"username": "johndoe", "email": "john.doe@example.org", "first_name": "John", "last_name": "Doe"},
    {"username": "janedoe", "email": "jane.doe@example.org", "first_name": "Jane", "last_name": "Doe"},
    {"username": "charlie", "email": "charlie.johnson@example.org", "first_name": "Charlie", "last_name": "Johnson"},
]

categories = [
    "Italian",
    "Mexican",
    "Asian",
    "Mediterranean",
    "Middle Eastern",
    "American",
    "Vegan",
    "Desserts",
]

meat_types = ["Meat", "Dairy", "Parve", "Mixed"]

ingredient_pool = [
    "olive oil",
    "garlic cloves",
    "red onion",
    "cherry tomatoes",
    "parmesan",
    "fresh basil",
    "chicken breast",
    "smoked paprika",
    "ground cumin",
    "tahini",
    "chickpeas",
    "lemon juice",
    "soy sauce",
    "white rice",
    "pasta",
    "butter",
    "eggs",
    "black beans",
    "tortillas",
    "coriander",
]

group_names = ["Sourdough Club", "Weeknight Dinners", "Spice Route", "Plant Based Kitchen"]

chat_phrases = [
    "Did you try the new recipe?",
    "That shakshuka looked amazing",
    "How long did you proof the dough?",
    "Swapping chicken for tofu worked great",
    "Sharing my grandmother's version tomorrow",
]

comment_phrases = [
    "Made this tonight, delicious!",
    "Great idea with the spices.",
    "Could I use butter instead of oil?",
    "My kids loved it.",
    "Saving this one.",
]
