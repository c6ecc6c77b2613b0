# scripts/check_eligibility.py
# One-shot run of the eligibility pipeline from the command line.
#   python scripts/check_eligibility.py --age 30 --condition asthma
#   python scripts/check_eligibility.py --age 30 --condition asthma --no-llm

import argparse
import json

from config.logging_config import quick_setup
from eligibility import PatientInput
from llm_reasoning import ReasoningGenerator
from trial_orchestrator import TrialOrchestrator

logger = quick_setup("check_eligibility")


def main() -> None:
    parser = argparse.ArgumentParser(description="Find ClinicalTrials.gov trials and check age-based eligibility")
    parser.add_argument("--age", type=float, required=True, help="Patient age in years")
    parser.add_argument("--condition", type=str, required=True, help="Condition search term")
    parser.add_argument("--no-llm", action="store_true", help="Skip LLM reasoning even if OPENAI_API_KEY is set")
    args = parser.parse_args()

    age = int(args.age) if args.age.is_integer() else args.age
    reasoner = ReasoningGenerator() if args.no_llm else ReasoningGenerator.from_config()
    orchestrator = TrialOrchestrator(reasoner=reasoner)

    result = orchestrator.run(PatientInput(age=age, condition=args.condition))
    logger.info(f"check_eligibility done: {len(result.trials)} trials")
    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
