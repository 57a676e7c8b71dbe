from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from cat_calories.calculator import compute
from cat_calories.energy import LIFE_STAGES, REFERENCE_RER, calculate_rer


def main() -> None:
    for weight, expected in REFERENCE_RER.items():
        actual = calculate_rer(weight)
        status = "OK" if actual == expected else "DIFF"
        print(f"weight={weight} chart={expected} calc={actual} {status}")

    sample = compute(4.0, LIFE_STAGES[3].factor)
    print(f"sample stage={LIFE_STAGES[3].key} rer={sample.rer} der={sample.der.min}-{sample.der.max}")


if __name__ == "__main__":
    main()
