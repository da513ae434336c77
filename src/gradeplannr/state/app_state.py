from dataclasses import dataclass, field
from gradeplannr.state.calculator_state import CalculatorState


@dataclass
class AppState:
    calculator: CalculatorState = field(default_factory=CalculatorState)


app_state = AppState()
