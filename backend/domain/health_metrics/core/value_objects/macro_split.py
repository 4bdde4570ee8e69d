"""MacroSplit value object - macronutrient distribution."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MacroSplit:
    """Macronutrient distribution in grams.

    Represents daily target for protein, carbohydrates, and fat.
    Uses standard calorie conversion: protein 4 kcal/g, carbs 4 kcal/g,
    fat 9 kcal/g.

    Values are not sign-checked: a degenerate calorie target yields a
    degenerate split instead of an error.

    Attributes:
        protein_g: Protein in grams
        carbs_g: Carbohydrates in grams
        fat_g: Fat in grams
    """

    protein_g: int
    carbs_g: int
    fat_g: int

    def total_calories(self) -> float:
        """Calculate total calories from macronutrients.

        Returns:
            float: Total calories (protein×4 + carbs×4 + fat×9)

        Example:
            >>> split = MacroSplit(protein_g=159, carbs_g=286, fat_g=85)
            >>> split.total_calories()
            2545
        """
        return (self.protein_g * 4) + (self.carbs_g * 4) + (self.fat_g * 9)

    def protein_percentage(self) -> float:
        """Protein percentage of total calories (0-100)."""
        total = self.total_calories()
        if total == 0:
            return 0.0
        return (self.protein_g * 4) / total * 100

    def carbs_percentage(self) -> float:
        """Carbs percentage of total calories (0-100)."""
        total = self.total_calories()
        if total == 0:
            return 0.0
        return (self.carbs_g * 4) / total * 100

    def fat_percentage(self) -> float:
        """Fat percentage of total calories (0-100)."""
        total = self.total_calories()
        if total == 0:
            return 0.0
        return (self.fat_g * 9) / total * 100

    def __str__(self) -> str:
        return f"{self.protein_g}P / {self.carbs_g}C / {self.fat_g}F"
