"""
probability.py
Pairwise win probabilities between dice and the help table built from them.
"""

from fractions import Fraction

from tabulate import tabulate

from .dice import Die

NOT_APPLICABLE = "-"


class ProbabilityCalculator:
    @staticmethod
    def calculate_win_probability(die1: Die, die2: Die) -> Fraction:
        # Ties count toward neither side but stay in the denominator.
        wins = sum(1 for f1 in die1.faces for f2 in die2.faces if f1 > f2)
        return Fraction(wins, len(die1) * len(die2))

    @staticmethod
    def format_probability(probability: Fraction, precision: int = 4) -> str:
        return f"{float(probability):.{precision}f}"


class HelpTableGenerator:
    @staticmethod
    def probability_matrix(all_dice: list[Die]) -> list[list[Fraction | None]]:
        """Row i, column j: chance that die i beats die j. None on the diagonal."""
        return [
            [
                None if i == j else ProbabilityCalculator.calculate_win_probability(user_die, pc_die)
                for j, pc_die in enumerate(all_dice)
            ]
            for i, user_die in enumerate(all_dice)
        ]

    @staticmethod
    def generate_table(all_dice: list[Die], precision: int = 4) -> str:
        headers = ["User v PC >"] + [str(d) for d in all_dice]
        table_data = []
        for user_die, cells in zip(all_dice, HelpTableGenerator.probability_matrix(all_dice)):
            row = [str(user_die)]
            for prob in cells:
                if prob is None:
                    row.append(NOT_APPLICABLE)
                else:
                    row.append(ProbabilityCalculator.format_probability(prob, precision))
            table_data.append(row)

        intro = (
            "\n--- Win Probability Table ---\n"
            "This table shows the probability of the User's die (rows) winning against the PC's die (columns).\n"
            "Ties are a win for neither side; a die never plays against itself.\n"
        )
        return intro + tabulate(table_data, headers=headers, tablefmt="grid", disable_numparse=True)
