from __future__ import annotations

import argparse
import math
import sys
import importlib
import inspect


def _finite_float(s: str) -> float:
    v = float(s)
    if not math.isfinite(v):
        raise argparse.ArgumentTypeError(f"angle must be a finite number, got {s!r}")
    return v


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_sine(argv: list[str]) -> int:
    import fxtrig

    p = argparse.ArgumentParser(prog="fxtrig sine", description="Fixed-point sine of one angle given in turns.")
    p.add_argument("angle", type=_finite_float, help="Angle as a fraction of a full turn, in [0, 1)")
    args = p.parse_args(argv)

    print(f"sine(2*PI*{args.angle:g}) = {fxtrig.sin_turn(args.angle):+0.6f}")
    return 0


def cmd_cosine(argv: list[str]) -> int:
    import fxtrig

    p = argparse.ArgumentParser(prog="fxtrig cosine", description="Fixed-point cosine of one angle given in turns.")
    p.add_argument("angle", type=_finite_float, help="Angle as a fraction of a full turn, in [0, 1)")
    args = p.parse_args(argv)

    print(f"cosine(2*PI*{args.angle:g}) = {fxtrig.cos_turn(args.angle):+0.6f}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="fxtrig", description="Fixed-point sine/cosine toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    # single angle
    sub.add_parser("sine", help="Approximate sine of one angle (in turns)", add_help=False)
    sub.add_parser("cosine", help="Approximate cosine of one angle (in turns)", add_help=False)

    # diagnostics
    sub.add_parser("demo", help="Print sampled sine/cosine waves", add_help=False)
    sub.add_parser("stats", help="Error statistics across every 20-bit input", add_help=False)
    p_diag = sub.add_parser("diag", help="Plotting diagnostics (needs numpy + matplotlib)")
    p_diag.add_argument("tool", choices=["error-plot"], help="Which diagnostic to run")

    # design tools
    sub.add_parser("coeffs", help="Generate fixed-point Taylor coefficients", add_help=False)

    args, rest = p.parse_known_args(argv)

    if args.cmd == "sine":
        return cmd_sine(rest)

    if args.cmd == "cosine":
        return cmd_cosine(rest)

    if args.cmd == "demo":
        return _run_module_main("fxtrig.diagnostics.demo", rest)

    if args.cmd == "stats":
        return _run_module_main("fxtrig.diagnostics.stats", rest)

    if args.cmd == "diag":
        tool_map = {
            "error-plot": "fxtrig.diagnostics.error_plot",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if args.cmd == "coeffs":
        return _run_module_main("fxtrig.design.taylor_coeffs", rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
