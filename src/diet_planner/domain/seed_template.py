"""Built-in two-week Italian template used to seed the plan store."""

from dataclasses import dataclass

TEMPLATE_NAME = "Piano Alimentare Italiano (2 Settimane)"
TEMPLATE_DESCRIPTION = (
    "Un piano alimentare italiano equilibrato che alterna due settimane di pasti "
    "diversi."
)


@dataclass(frozen=True)
class Nutrition:
    """Nutrition values for one serving of a food."""

    calories: float
    carbohydrates: float
    protein: float
    fat: float


@dataclass(frozen=True)
class TemplateFood:
    """A food entry of the seed template."""

    food_name: str
    quantity: float = 1
    unit: str = "porzione"

    @property
    def nutrition(self) -> Nutrition:
        return NUTRITION.get(self.food_name, NO_NUTRITION)


NO_NUTRITION = Nutrition(calories=0, carbohydrates=0, protein=0, fat=0)

NUTRITION: dict[str, Nutrition] = {
    # Breakfast
    "Caffè espresso": Nutrition(5, 0.5, 0.1, 0),
    "Cappuccino": Nutrition(120, 12, 8, 4),
    "Cornetto vuoto": Nutrition(220, 30, 5, 10),
    "Cornetto alla crema": Nutrition(280, 35, 5, 13),
    "Cornetto alla marmellata": Nutrition(250, 33, 5, 11),
    "Fette biscottate": Nutrition(40, 7, 1, 1),
    "Marmellata di albicocche": Nutrition(30, 7, 0, 0),
    "Miele": Nutrition(65, 17, 0, 0),
    "Yogurt bianco": Nutrition(120, 10, 6, 5),
    "Yogurt alla frutta": Nutrition(150, 20, 6, 5),
    "Frutta fresca (mela)": Nutrition(80, 21, 0.3, 0.2),
    "Frutta fresca (banana)": Nutrition(105, 27, 1.3, 0.4),
    "Frutta fresca (arancia)": Nutrition(65, 16, 1.2, 0.2),
    "Pane tostato": Nutrition(80, 15, 3, 1),
    "Burro": Nutrition(100, 0, 0.1, 11),
    # Lunch and dinner
    "Pasta al pomodoro": Nutrition(320, 60, 10, 5),
    "Pasta alla carbonara": Nutrition(450, 60, 15, 18),
    "Pasta al pesto": Nutrition(400, 60, 12, 15),
    "Risotto ai funghi": Nutrition(350, 65, 8, 8),
    "Risotto alla milanese": Nutrition(380, 65, 8, 10),
    "Pizza margherita": Nutrition(270, 33, 12, 10),
    "Lasagna alla bolognese": Nutrition(380, 35, 20, 18),
    "Minestrone di verdure": Nutrition(160, 20, 5, 5),
    "Pollo arrosto": Nutrition(220, 0, 30, 10),
    "Bistecca di manzo": Nutrition(250, 0, 35, 12),
    "Pesce alla griglia (orata)": Nutrition(180, 0, 28, 8),
    "Insalata mista": Nutrition(70, 5, 2, 4),
    "Insalata caprese": Nutrition(250, 6, 14, 18),
    "Verdure grigliate": Nutrition(90, 10, 3, 4),
    "Patate al forno": Nutrition(180, 35, 3, 4),
    "Pane (ciabatta)": Nutrition(120, 24, 4, 1),
    "Frittata di verdure": Nutrition(220, 5, 15, 15),
    "Polpette al sugo": Nutrition(280, 10, 20, 18),
    "Melanzane alla parmigiana": Nutrition(300, 15, 10, 22),
    # Snacks
    "Frutta secca (mandorle)": Nutrition(170, 6, 6, 15),
    "Frutta secca (noci)": Nutrition(190, 4, 4, 18),
    "Yogurt greco": Nutrition(150, 6, 15, 8),
    "Formaggio (parmigiano)": Nutrition(110, 1, 10, 7),
    "Formaggio (mozzarella)": Nutrition(90, 1, 6, 7),
    "Prosciutto crudo": Nutrition(70, 0, 10, 3),
    "Prosciutto cotto": Nutrition(60, 1, 8, 3),
    "Frutta fresca (pera)": Nutrition(100, 25, 0.6, 0.2),
    "Frutta fresca (pesche)": Nutrition(60, 15, 1, 0.1),
    "Frutta fresca (uva)": Nutrition(70, 18, 0.6, 0.2),
    "Crackers integrali": Nutrition(80, 15, 2, 2),
    "Bruschetta al pomodoro": Nutrition(130, 18, 3, 5),
    # Desserts
    "Gelato alla crema": Nutrition(200, 25, 4, 10),
    "Gelato al cioccolato": Nutrition(220, 28, 4, 11),
    "Tiramisù": Nutrition(300, 30, 6, 18),
    "Panna cotta": Nutrition(250, 25, 4, 15),
    "Cannolo siciliano": Nutrition(270, 30, 5, 14),
    "Frutta fresca (fragole)": Nutrition(45, 10, 1, 0.4),
    "Macedonia di frutta": Nutrition(80, 20, 1, 0.2),
}

_F = TemplateFood

TWO_WEEK_TEMPLATE: dict[str, dict[str, tuple[TemplateFood, ...]]] = {
    "week1_Monday": {
        "breakfast": (
            _F("Caffè espresso"),
            _F("Cornetto vuoto"),
            _F("Frutta fresca (mela)"),
        ),
        "lunch": (
            _F("Pasta al pomodoro"),
            _F("Insalata mista"),
            _F("Pane (ciabatta)", 1, "fetta"),
            _F("Frutta fresca (pera)"),
        ),
        "snack": (
            _F("Yogurt greco", 1, "vasetto"),
            _F("Frutta secca (mandorle)", 30, "g"),
        ),
        "dinner": (
            _F("Minestrone di verdure"),
            _F("Pollo arrosto", 150, "g"),
            _F("Verdure grigliate"),
            _F("Pane (ciabatta)", 1, "fetta"),
        ),
    },
    "week1_Tuesday": {
        "breakfast": (
            _F("Cappuccino"),
            _F("Fette biscottate", 3, "fette"),
            _F("Marmellata di albicocche", 1, "cucchiaio"),
        ),
        "lunch": (
            _F("Risotto ai funghi"),
            _F("Insalata mista"),
            _F("Frutta fresca (arancia)"),
        ),
        "snack": (_F("Frutta fresca (banana)"),),
        "dinner": (
            _F("Pesce alla griglia (orata)", 150, "g"),
            _F("Patate al forno"),
            _F("Insalata mista"),
            _F("Frutta fresca (fragole)", 100, "g"),
        ),
    },
    "week1_Wednesday": {
        "breakfast": (
            _F("Yogurt bianco", 1, "vasetto"),
            _F("Miele", 1, "cucchiaio"),
            _F("Frutta fresca (banana)"),
        ),
        "lunch": (
            _F("Pasta al pesto"),
            _F("Formaggio (mozzarella)", 60, "g"),
            _F("Insalata mista"),
            _F("Frutta fresca (pera)"),
        ),
        "snack": (
            _F("Crackers integrali", 4, "pezzi"),
            _F("Formaggio (parmigiano)", 30, "g"),
        ),
        "dinner": (
            _F("Frittata di verdure"),
            _F("Verdure grigliate"),
            _F("Pane (ciabatta)", 1, "fetta"),
            _F("Macedonia di frutta"),
        ),
    },
    "week1_Thursday": {
        "breakfast": (
            _F("Caffè espresso"),
            _F("Pane tostato", 2, "fette"),
            _F("Marmellata di albicocche", 1, "cucchiaio"),
        ),
        "lunch": (
            _F("Insalata caprese"),
            _F("Pane (ciabatta)", 1, "fetta"),
            _F("Frutta fresca (pesche)"),
        ),
        "snack": (_F("Yogurt alla frutta", 1, "vasetto"),),
        "dinner": (
            _F("Risotto alla milanese"),
            _F("Bistecca di manzo", 150, "g"),
            _F("Verdure grigliate"),
            _F("Frutta fresca (uva)", 100, "g"),
        ),
    },
    "week1_Friday": {
        "breakfast": (
            _F("Cappuccino"),
            _F("Cornetto alla marmellata"),
        ),
        "lunch": (
            _F("Pizza margherita", 2, "fette"),
            _F("Insalata mista"),
            _F("Frutta fresca (mela)"),
        ),
        "snack": (_F("Frutta secca (noci)", 30, "g"),),
        "dinner": (
            _F("Pesce alla griglia (orata)", 150, "g"),
            _F("Patate al forno"),
            _F("Insalata mista"),
            _F("Gelato alla crema", 1, "pallina"),
        ),
    },
    "week1_Saturday": {
        "breakfast": (
            _F("Yogurt bianco", 1, "vasetto"),
            _F("Miele", 1, "cucchiaio"),
            _F("Frutta fresca (banana)"),
        ),
        "lunch": (
            _F("Lasagna alla bolognese"),
            _F("Insalata mista"),
            _F("Frutta fresca (arancia)"),
        ),
        "snack": (_F("Bruschetta al pomodoro"),),
        "dinner": (
            _F("Minestrone di verdure"),
            _F("Prosciutto crudo", 60, "g"),
            _F("Formaggio (mozzarella)", 60, "g"),
            _F("Pane (ciabatta)", 1, "fetta"),
            _F("Frutta fresca (fragole)", 100, "g"),
        ),
    },
    "week1_Sunday": {
        "breakfast": (
            _F("Cappuccino"),
            _F("Cornetto alla crema"),
            _F("Frutta fresca (arancia)"),
        ),
        "lunch": (
            _F("Pasta alla carbonara"),
            _F("Insalata mista"),
            _F("Pane (ciabatta)", 1, "fetta"),
            _F("Tiramisù", 1, "porzione piccola"),
        ),
        "snack": (_F("Macedonia di frutta"),),
        "dinner": (
            _F("Polpette al sugo"),
            _F("Verdure grigliate"),
            _F("Pane (ciabatta)", 1, "fetta"),
            _F("Frutta fresca (pera)"),
        ),
    },
    "week2_Monday": {
        "breakfast": (
            _F("Caffè espresso"),
            _F("Fette biscottate", 3, "fette"),
            _F("Miele", 1, "cucchiaio"),
            _F("Frutta fresca (arancia)"),
        ),
        "lunch": (
            _F("Pasta al pesto"),
            _F("Insalata mista"),
            _F("Frutta fresca (mela)"),
        ),
        "snack": (_F("Yogurt greco", 1, "vasetto"),),
        "dinner": (
            _F("Pollo arrosto", 150, "g"),
            _F("Patate al forno"),
            _F("Insalata mista"),
            _F("Frutta fresca (pera)"),
        ),
    },
    "week2_Tuesday": {
        "breakfast": (
            _F("Cappuccino"),
            _F("Cornetto vuoto"),
        ),
        "lunch": (
            _F("Insalata caprese"),
            _F("Pane (ciabatta)", 1, "fetta"),
            _F("Frutta fresca (pesche)"),
        ),
        "snack": (_F("Frutta secca (mandorle)", 30, "g"),),
        "dinner": (
            _F("Risotto ai funghi"),
            _F("Bistecca di manzo", 150, "g"),
            _F("Verdure grigliate"),
            _F("Gelato al cioccolato", 1, "pallina"),
        ),
    },
    "week2_Wednesday": {
        "breakfast": (
            _F("Yogurt alla frutta", 1, "vasetto"),
            _F("Frutta fresca (banana)"),
        ),
        "lunch": (
            _F("Pasta al pomodoro"),
            _F("Formaggio (mozzarella)", 60, "g"),
            _F("Insalata mista"),
            _F("Frutta fresca (fragole)", 100, "g"),
        ),
        "snack": (_F("Crackers integrali", 4, "pezzi"),),
        "dinner": (
            _F("Melanzane alla parmigiana"),
            _F("Pane (ciabatta)", 1, "fetta"),
            _F("Insalata mista"),
            _F("Frutta fresca (uva)", 100, "g"),
        ),
    },
    "week2_Thursday": {
        "breakfast": (
            _F("Caffè espresso"),
            _F("Pane tostato", 2, "fette"),
            _F("Burro", 1, "cucchiaio"),
            _F("Marmellata di albicocche", 1, "cucchiaio"),
        ),
        "lunch": (
            _F("Minestrone di verdure"),
            _F("Prosciutto cotto", 60, "g"),
            _F("Formaggio (parmigiano)", 30, "g"),
            _F("Pane (ciabatta)", 1, "fetta"),
            _F("Frutta fresca (mela)"),
        ),
        "snack": (
            _F("Yogurt bianco", 1, "vasetto"),
            _F("Miele", 1, "cucchiaio"),
        ),
        "dinner": (
            _F("Pesce alla griglia (orata)", 150, "g"),
            _F("Verdure grigliate"),
            _F("Pane (ciabatta)", 1, "fetta"),
            _F("Macedonia di frutta"),
        ),
    },
    "week2_Friday": {
        "breakfast": (
            _F("Cappuccino"),
            _F("Cornetto alla marmellata"),
        ),
        "lunch": (
            _F("Risotto alla milanese"),
            _F("Insalata mista"),
            _F("Frutta fresca (pera)"),
        ),
        "snack": (_F("Frutta secca (noci)", 30, "g"),),
        "dinner": (
            _F("Pizza margherita", 2, "fette"),
            _F("Insalata mista"),
            _F("Panna cotta", 1, "porzione piccola"),
        ),
    },
    "week2_Saturday": {
        "breakfast": (
            _F("Yogurt bianco", 1, "vasetto"),
            _F("Frutta fresca (banana)"),
            _F("Frutta secca (mandorle)", 30, "g"),
        ),
        "lunch": (
            _F("Pasta alla carbonara"),
            _F("Insalata mista"),
            _F("Frutta fresca (arancia)"),
        ),
        "snack": (_F("Bruschetta al pomodoro"),),
        "dinner": (
            _F("Frittata di verdure"),
            _F("Verdure grigliate"),
            _F("Pane (ciabatta)", 1, "fetta"),
            _F("Cannolo siciliano"),
        ),
    },
    "week2_Sunday": {
        "breakfast": (
            _F("Cappuccino"),
            _F("Cornetto alla crema"),
            _F("Frutta fresca (arancia)"),
        ),
        "lunch": (
            _F("Lasagna alla bolognese"),
            _F("Insalata mista"),
            _F("Pane (ciabatta)", 1, "fetta"),
            _F("Tiramisù", 1, "porzione piccola"),
        ),
        "snack": (_F("Macedonia di frutta"),),
        "dinner": (
            _F("Polpette al sugo"),
            _F("Patate al forno"),
            _F("Insalata mista"),
            _F("Frutta fresca (fragole)", 100, "g"),
        ),
    },
}
