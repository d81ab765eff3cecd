from __future__ import annotations

import argparse
from typing import Sequence

from maxcover import __version__
from maxcover.errors import MaxCoverError

DEFAULT_CONFIG = "configs/maxcover.yaml"


def non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}") from exc
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {value}")
    return value


def k_list(text: str) -> list[int]:
    values = [non_negative_int(x.strip()) for x in text.split(",") if x.strip()]
    if not values:
        raise argparse.ArgumentTypeError("expected at least one k, e.g. 0,1,2")
    return values


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cover",
        description="Constructs and (optimally) solves Maximum k-Coverage instances.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    p_gen = sub.add_parser("generate", help="Generate a random instance")
    p_gen.add_argument("output")
    p_gen.add_argument("elements", type=int)
    p_gen.add_argument("sets", type=int)
    p_gen.add_argument("--max-size", type=int, default=None, help="Maximum set size.")
    p_gen.add_argument("--seed", type=int, default=None)
    p_gen.add_argument("--max-attempts", type=int, default=None)
    p_gen.add_argument("--config", default=DEFAULT_CONFIG)

    p_solve = sub.add_parser("solve", help="Solve an instance for a given k")
    p_solve.add_argument("input")
    p_solve.add_argument("k", type=non_negative_int)
    p_solve.add_argument("--threads", type=int, default=None, help="Set number of threads used.")
    p_solve.add_argument("--write", default=None, help="Write solution to <name>.")
    p_solve.add_argument("--solver", default=None, help="pulp_cbc, ortools_cp_sat or bruteforce")
    p_solve.add_argument("--time-limit", type=float, default=None, help="Solver time limit in seconds.")
    p_solve.add_argument("--msg", action="store_true", default=None, help="Show solver log.")
    p_solve.add_argument("--lp-file", default=None, help="Write the model in LP format (pulp_cbc only).")
    p_solve.add_argument("--no-verify", dest="verify", action="store_false")
    p_solve.set_defaults(verify=None)
    p_solve.add_argument("--config", default=DEFAULT_CONFIG)

    p_sweep = sub.add_parser("sweep", help="Solve an instance for several k")
    p_sweep.add_argument("input")
    p_sweep.add_argument("--ks", type=k_list, default=None, help="Comma separated, e.g. 0,1,2,3")
    p_sweep.add_argument("--solver", default=None)
    p_sweep.add_argument("--threads", type=int, default=None)
    p_sweep.add_argument("--time-limit", type=float, default=None)
    p_sweep.add_argument("--output-root", default=None)
    p_sweep.add_argument("--with-plots", dest="with_plots", action="store_true")
    p_sweep.add_argument("--no-plots", dest="with_plots", action="store_false")
    p_sweep.set_defaults(with_plots=None)
    p_sweep.add_argument("--config", default=DEFAULT_CONFIG)

    return parser


def cmd_generate(args: argparse.Namespace) -> None:
    from maxcover.config import load_config
    from maxcover.generator import generate_instance
    from maxcover.io_dataset import write_instance

    cfg = load_config(
        args.config,
        overrides={
            "generate.elements": args.elements,
            "generate.sets": args.sets,
            "generate.max_size": args.max_size,
            "generate.seed": args.seed,
            "generate.max_attempts": args.max_attempts,
        },
    )
    gen = cfg["generate"]
    instance = generate_instance(
        num_elements=int(gen["elements"]),
        num_sets=int(gen["sets"]),
        max_size=gen["max_size"],
        seed=gen["seed"],
        max_attempts=gen["max_attempts"],
    )
    path = write_instance(instance, args.output)
    print(f"Instance written: {path} (elements={instance.n_elements}, sets={instance.n_sets})")


def _solver_overrides(args: argparse.Namespace) -> dict[str, object]:
    return {
        "solve.solver": args.solver,
        "solve.threads": args.threads,
        "solve.time_limit_sec": args.time_limit,
    }


def cmd_solve(args: argparse.Namespace) -> None:
    from maxcover.config import load_config
    from maxcover.io_dataset import read_instance, write_solution
    from maxcover.solve import load_solver, solve_instance

    overrides = _solver_overrides(args)
    overrides["solve.msg"] = 1 if args.msg else None
    overrides["solve.verify"] = args.verify
    overrides["solve.lp_path"] = args.lp_file
    cfg = load_config(args.config, overrides=overrides)
    opts = cfg["solve"]

    params: dict[str, object] = {}
    if opts["lp_path"] is not None:
        params["lp_path"] = opts["lp_path"]

    instance = read_instance(args.input)
    solution, result = solve_instance(
        instance,
        args.k,
        solver=load_solver(str(opts["solver"]), registry=cfg["solvers"]),
        threads=int(opts["threads"]),
        time_limit_sec=opts["time_limit_sec"],
        msg=int(opts["msg"]),
        verify=bool(opts["verify"]),
        **params,
    )
    print(f"Solution(objective={solution.objective}, sol={list(solution.sol)})")
    print(f"solver={result.meta.get('solver')} status={result.status} runtime_sec={result.runtime_sec:.3f}")
    if args.write is not None:
        path = write_solution(solution, args.write)
        print(f"Solution written: {path}")


def cmd_sweep(args: argparse.Namespace) -> None:
    from maxcover.config import load_config
    from maxcover.io_dataset import read_instance
    from maxcover.solve import load_solver
    from maxcover.sweep import is_monotone, run_k_sweep, sweep_run_dir, write_sweep

    overrides = _solver_overrides(args)
    if args.ks is not None:
        overrides["sweep.ks"] = args.ks
    overrides["sweep.output_root"] = args.output_root
    if args.with_plots is not None:
        overrides["sweep.generate_plots"] = bool(args.with_plots)
    cfg = load_config(args.config, overrides=overrides)
    opts = cfg["solve"]
    sweep_cfg = cfg["sweep"]

    instance = read_instance(args.input)
    sweep_df = run_k_sweep(
        instance,
        ks=[int(k) for k in sweep_cfg["ks"]],
        solver=load_solver(str(opts["solver"]), registry=cfg["solvers"]),
        threads=int(opts["threads"]),
        time_limit_sec=opts["time_limit_sec"],
        msg=int(opts["msg"]),
        verify=bool(opts["verify"]),
    )
    run_dir = sweep_run_dir(sweep_cfg["output_root"], str(sweep_cfg["run_id_prefix"]))
    paths = write_sweep(sweep_df, run_dir, with_plots=bool(sweep_cfg["generate_plots"]))

    print(sweep_df[["k", "objective", "selected_count", "runtime_sec"]].to_string(index=False))
    if not is_monotone(sweep_df):
        print("Warning: optimal coverage decreased for a larger k")
    print(f"Sweep finished: {run_dir}")
    for path in paths:
        print(path)


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "generate":
            cmd_generate(args)
        elif args.command == "solve":
            cmd_solve(args)
        elif args.command == "sweep":
            cmd_sweep(args)
        else:
            parser.error(f"Unknown command: {args.command}")
    except MaxCoverError as exc:
        parser.exit(2, f"{type(exc).__name__}: {exc}\n")


if __name__ == "__main__":
    main()
