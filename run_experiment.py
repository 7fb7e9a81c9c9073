"""
Entry point for running one benchmark configuration.

This script wires together:
- A reference problem (ZDT1 or multi-objective knapsack),
- A reference optimizer (random search, GA, Optuna NSGA-II),
- An instance, either a JSON file or a built-in default,

and runs it a number of times through the concurrent runner. Every run is
written as JSON by `JsonReport` and progress is emitted via loguru.
"""

import argparse
import os

from loguru import logger

from optlab.core.loader import JsonFileLoader
from optlab.optimizers import GAOptimizer, OptunaNSGA2Optimizer, RandomSearchOptimizer
from optlab.runner import (
    AlgorithmFactory,
    DictLoaderFactory,
    FileLoaderFactory,
    JsonReport,
    Label,
    ProblemFactory,
    ProgressLogger,
    SimpleRunnerBuilder,
)
from optlab.tasks import KnapsackProblem, ZDT1Problem, make_knapsack_instance
from optlab.utils import set_global_seed, setup_logger

PROBLEMS = {
    "zdt1": ZDT1Problem,
    "knapsack": KnapsackProblem,
}

ALGORITHMS = {
    "random": RandomSearchOptimizer,
    "ga": GAOptimizer,
    "nsga2": OptunaNSGA2Optimizer,
}


def build_loader_factory(problem: str, instance, seed: int):
    """
    Loader factory for the chosen problem.

    Parameters
    ----------
    problem : str
        Key of PROBLEMS.
    instance : str or None
        Path of a JSON instance file. When None a default instance is used:
        30 variables for ZDT1, a random 50-item bi-objective instance for
        the knapsack.
    seed : int
        Seed of the generated knapsack instance.
    """
    if instance is not None:
        return FileLoaderFactory(JsonFileLoader, instance)
    if problem == "knapsack":
        return DictLoaderFactory(make_knapsack_instance(seed=seed))
    elif problem == "zdt1":
        return DictLoaderFactory({"n_variables": 30})
    else:
        raise ValueError(f"Unknown problem {problem}")


def main():
    """
    CLI entry point:

    Example
    -------
    Random search on ZDT1, 5 replications on 4 threads:

        python run_experiment.py \\
            --problem zdt1 \\
            --algorithm random \\
            --n_trials 500 \\
            --replications 5 \\
            --workers 4 \\
            --out_dir results

    GA on a knapsack instance file with an epsilon archive:

        python run_experiment.py \\
            --problem knapsack \\
            --algorithm ga \\
            --instance instances/kp50.json \\
            --epsilon 5
    """
    parser = argparse.ArgumentParser(description="optlab experiments")
    parser.add_argument(
        "--problem",
        type=str,
        choices=sorted(PROBLEMS),
        required=True,
        help="Benchmark problem to solve.",
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        choices=sorted(ALGORITHMS),
        required=True,
        help="Optimizer to use.",
    )
    parser.add_argument(
        "--instance",
        type=str,
        default=None,
        help="JSON file with the problem instance (default: built-in instance).",
    )
    parser.add_argument("--n_trials", type=int, default=200, help="Evaluation budget per run.")
    parser.add_argument("--replications", type=int, default=1, help="Independent runs, with seeds seed, seed+1, ...")
    parser.add_argument("--workers", type=int, default=None, help="Worker threads (default: CPU count).")
    parser.add_argument("--seed", type=int, default=0, help="Random seed.")
    parser.add_argument(
        "--epsilon",
        type=float,
        default=None,
        help="Use an epsilon-dominance archive with this box size on every objective.",
    )
    parser.add_argument(
        "--out_dir",
        type=str,
        default="results",
        help="Directory for JSON results and logs.",
    )
    args = parser.parse_args()

    run_name = f"{args.algorithm}_{args.problem}_seed{args.seed}"
    out_dir = os.path.join(args.out_dir, run_name)
    os.makedirs(out_dir, exist_ok=True)

    # Configure logger
    setup_logger(log_dir=out_dir, run_name=run_name)

    set_global_seed(args.seed)

    logger.info(
        f"Starting experiment: problem={args.problem}, algorithm={args.algorithm}, "
        f"instance={args.instance or 'default'}, n_trials={args.n_trials}, "
        f"replications={args.replications}, seed={args.seed}, epsilon={args.epsilon}"
    )

    problem_factory = ProblemFactory(PROBLEMS[args.problem])
    algorithm_factory = AlgorithmFactory(ALGORITHMS[args.algorithm])
    loader_factory = build_loader_factory(args.problem, args.instance, args.seed)
    label = Label(args.problem, args.algorithm, args.instance or "default")

    builder = SimpleRunnerBuilder()
    for replication in range(max(args.replications, 1)):
        parameters = {"n_trials": args.n_trials, "seed": args.seed + replication}
        if args.epsilon is not None:
            parameters["epsilon"] = args.epsilon
        builder.add_entry(problem_factory, algorithm_factory, loader_factory, parameters, label)

    progress = ProgressLogger()
    builder.add_listener(progress)
    builder.add_listener(JsonReport(out_dir))

    runner = builder.build()
    runner.run(args.workers)

    logger.info(
        f"Experiment completed: {progress.succeeded} succeeded, {progress.failed} failed. "
        f"Results in {out_dir}"
    )


if __name__ == "__main__":
    main()
