#!/usr/bin/env python3
"""Play the solver against sampled secrets and report how it does."""

from __future__ import annotations

import argparse
import json
import math
import random
import sys
from pathlib import Path

from constraints import DEFAULT_CONFIG, SolverConfig, format_feedback
from lexicon import load_words
from solver import WordleSolver
from wordle_env import WordleEnv

RESULTS_DIR = Path(__file__).resolve().parent / "results"


def _entropy_bits(n: int) -> float:
    return math.log2(n) if n > 1 else 0.0


def run_experiment(
    vocabulary,
    num_games: int = 10,
    seed: int = 42,
    max_guesses: int = 6,
    config: SolverConfig = DEFAULT_CONFIG,
    verbose: bool = False,
) -> list[dict]:
    """Solve *num_games* secrets sampled from *vocabulary*.

    Each game gets a fresh ``WordleSolver`` seeded from the experiment
    RNG, so a run is reproducible from *seed* alone.
    """
    vocab = sorted(vocabulary)
    rng = random.Random(seed)
    secrets = rng.sample(vocab, min(num_games, len(vocab)))

    env = WordleEnv(vocabulary=vocab, word_length=config.word_length,
                    max_guesses=max_guesses)

    logs: list[dict] = []

    for i, secret in enumerate(secrets, 1):
        env.reset(secret=secret)
        solver = WordleSolver(vocab, config=config, seed=rng.randrange(2**31))
        game_log: list[dict] = []

        if verbose:
            print(f"\n--- Game {i}/{len(secrets)} | Secret: {secret} ---")

        while not env.game_over() and not solver.exhausted:
            word = solver.recommend()
            marks = env.guess(word)
            outcome = solver.record(word, marks)
            ent = _entropy_bits(outcome.remaining)

            step = {
                "guess": word,
                "feedback": format_feedback(marks, config),
                "remaining": outcome.remaining,
                "entropy_bits": round(ent, 3),
            }
            game_log.append(step)

            if verbose:
                print(
                    f"  Guess {len(game_log)}: {word}  {step['feedback']}  "
                    f"remaining={outcome.remaining}  H={ent:.2f} bits"
                )

        result = {
            "game": i,
            "secret": secret,
            "solved": env.is_solved(),
            "num_guesses": len(env.history),
            "steps": game_log,
        }
        logs.append(result)

        if verbose:
            status = "SOLVED" if env.is_solved() else "FAILED"
            print(f"  -> {status} in {len(env.history)} guesses")

    return logs


def summarize(logs: list[dict]) -> dict:
    n = len(logs)
    solved = sum(1 for g in logs if g["solved"])
    guesses = sorted(g["num_guesses"] for g in logs)
    if not n:
        return {"games": 0, "solved": 0, "solve_rate": 0, "mean_guesses": 0,
                "median_guesses": 0, "max_guesses": 0}
    median = (
        guesses[n // 2]
        if n % 2 == 1
        else (guesses[n // 2 - 1] + guesses[n // 2]) / 2
    )
    return {
        "games": n,
        "solved": solved,
        "solve_rate": round(solved / n, 4),
        "mean_guesses": round(sum(guesses) / n, 3),
        "median_guesses": median,
        "max_guesses": guesses[-1],
    }


def print_experiment_summary(logs: list[dict]) -> None:
    s = summarize(logs)
    n = s["games"]
    if not n:
        print("\nNo games played.")
        return
    print(f"\n=== Letter-frequency solver - {n} games ===")
    print(f"  Solved: {s['solved']}/{n} ({100 * s['solve_rate']:.1f}%)")
    print(f"  Guesses - mean: {s['mean_guesses']:.2f}, "
          f"median: {s['median_guesses']:.1f}, max: {s['max_guesses']}")


def plot_distribution(logs: list[dict], path: Path | None = None) -> None:
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    guesses = [g["num_guesses"] for g in logs]
    mx = max(guesses) if guesses else 6
    bins = list(range(1, mx + 2))

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.hist(guesses, bins=bins, edgecolor="black", align="left")
    ax.set_title("Letter-frequency solver - guess distribution")
    ax.set_xlabel("Guesses")
    ax.set_ylabel("Count")
    fig.tight_layout()

    dest = path or RESULTS_DIR / "experiment.png"
    dest.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(dest, dpi=150)
    plt.close(fig)
    print(f"Plot saved to {dest}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark the Wordle solver by self-play")
    parser.add_argument("--words", type=str, default=None,
                        help="Path to word list (default: system word list)")
    parser.add_argument("--length", type=int, default=5, help="Word length")
    parser.add_argument("--max-guesses", type=int, default=6, help="Max guesses per game")
    parser.add_argument("--num-games", type=int, default=10, help="Number of games")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--verbose", action="store_true", help="Print per-game details")
    parser.add_argument("--plot", type=str, default=None, help="Save plot to this path")
    parser.add_argument("--no-plot", action="store_true", help="Skip the histogram")
    parser.add_argument("--json", type=str, default=None, help="Save results as JSON")
    args = parser.parse_args(argv)

    try:
        words = load_words(args.words, word_length=args.length)
    except (OSError, ValueError) as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1
    print(f"Vocabulary: {len(words)} words of length {args.length}")

    config = SolverConfig(word_length=args.length)
    logs = run_experiment(
        vocabulary=words,
        num_games=args.num_games,
        seed=args.seed,
        max_guesses=args.max_guesses,
        config=config,
        verbose=args.verbose,
    )

    print_experiment_summary(logs)

    if not args.no_plot:
        plot_path = Path(args.plot) if args.plot else RESULTS_DIR / "experiment.png"
        plot_distribution(logs, plot_path)

    json_path = Path(args.json) if args.json else RESULTS_DIR / "experiment.json"
    json_path.parent.mkdir(parents=True, exist_ok=True)
    output = {
        "solver": "letter-frequency",
        "config": {
            "word_length": args.length,
            "max_guesses": args.max_guesses,
            "num_games": args.num_games,
            "seed": args.seed,
        },
        "summary": summarize(logs),
        "games": logs,
    }
    json_path.write_text(json.dumps(output, indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"JSON saved to {json_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
