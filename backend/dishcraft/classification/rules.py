"""
Keyword rule tables for ingredient classification.

CATEGORY_RULES is evaluated in order; the first rule with a literal contained in the
lowercased name wins. Literal lists overlap ("pepper", "bean", "corn", "egg" in
"eggplant"), so the order below is the tie-break and must not be reshuffled.
"""
from dishcraft.models.records import Category

PROTEIN_KEYWORDS: tuple[str, ...] = (
    "chicken", "beef", "pork", "fish", "salmon", "turkey",
    "tofu", "egg", "shrimp", "lamb", "duck", "tuna",
    "cod", "beans", "lentils", "chickpeas", "tempeh", "bacon",
    "ham", "sausage", "crab", "lobster", "scallops",
)

GRAIN_KEYWORDS: tuple[str, ...] = (
    "rice", "pasta", "bread", "quinoa", "potato", "noodles",
    "couscous", "barley", "oats", "flour", "tortilla", "bagel",
    "cereal", "crackers", "wheat",
)

VEGETABLE_KEYWORDS: tuple[str, ...] = (
    "tomato", "onion", "pepper", "carrot", "broccoli", "spinach",
    "lettuce", "cucumber", "celery", "mushroom", "zucchini", "eggplant",
    "cabbage", "kale", "asparagus", "corn", "peas", "bean",
    "squash", "beet", "radish", "artichoke", "leek", "fennel",
    "chard", "arugula", "endive",
)

DAIRY_KEYWORDS: tuple[str, ...] = (
    "cheese", "milk", "yogurt", "butter", "cream", "sour cream",
    "cottage cheese", "ricotta", "mozzarella", "cheddar", "parmesan", "feta",
    "goat cheese", "brie", "camembert",
)

FRUIT_KEYWORDS: tuple[str, ...] = (
    "apple", "banana", "orange", "lemon", "lime", "berry",
    "grape", "peach", "pear", "cherry", "mango", "pineapple",
    "avocado", "coconut", "strawberry", "blueberry", "raspberry", "blackberry",
    "cranberry", "kiwi", "papaya", "melon", "watermelon", "cantaloupe",
)

SPICE_KEYWORDS: tuple[str, ...] = (
    "salt", "pepper", "garlic", "herb", "spice", "basil",
    "oregano", "thyme", "rosemary", "cumin", "paprika", "cinnamon",
    "ginger", "turmeric", "curry", "chili", "cayenne", "nutmeg",
    "cardamom", "cloves", "allspice", "bay", "dill", "parsley",
    "cilantro", "mint", "sage",
)

CategoryRules = tuple[tuple[Category, tuple[str, ...]], ...]

CATEGORY_RULES: CategoryRules = (
    (Category.PROTEIN, PROTEIN_KEYWORDS),
    (Category.GRAIN, GRAIN_KEYWORDS),
    (Category.VEGETABLE, VEGETABLE_KEYWORDS),
    (Category.DAIRY, DAIRY_KEYWORDS),
    (Category.FRUIT, FRUIT_KEYWORDS),
    (Category.SPICE, SPICE_KEYWORDS),
)

# Liquids and condiments that make up a sauce or base
SAUCE_BASE_KEYWORDS: tuple[str, ...] = (
    "oil", "vinegar", "sauce", "dressing", "marinade",
    "stock", "broth", "wine", "juice",
)
