#!/usr/bin/env python3
# expansion_lp/main.py
from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path

import pandas as pd

from expansion_lp.core.config import RunConfig, DATA_DIR, SOLVER_NAME, NSE_COST
from expansion_lp.core.errors import InvalidInput, SolverError
from expansion_lp.core.types import Variant
from expansion_lp.generators.io import read_generator_table
from expansion_lp.pipeline import load_inputs, run_expansion
from expansion_lp.sweep import sweep_fuel_cost


def _parse_prices(raw: str):
    return [float(x) for x in raw.split(",") if x.strip()]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Expansión de capacidad (LP) con demanda horaria")
    ap.add_argument("--data-dir", default=str(DATA_DIR),
                    help="Carpeta con generators.csv, demand.csv y capacity_factors.csv")
    ap.add_argument("--variant", choices=[v.value for v in Variant], default=Variant.GREENFIELD.value)
    ap.add_argument("--solver", default=SOLVER_NAME)
    ap.add_argument("--nse-cost", type=float, default=NSE_COST, help="$/MWh de energía no servida")
    ap.add_argument("--include-capex", action="store_true",
                    help="Brownfield: cobra también la anualidad del capex de unidades existentes")
    ap.add_argument("--demand-col", default="demand")
    ap.add_argument("--max-hours", type=int, default=None, help="Recorta el horizonte (pruebas rápidas)")
    ap.add_argument("--out", default=None, help="Carpeta de salida para CSVs")
    ap.add_argument("--sweep-fuel", default=None, help="Nombre de combustible a barrer")
    ap.add_argument("--prices", type=_parse_prices, default=None, help="Precios separados por coma")
    ap.add_argument("--tee", action="store_true", help="Muestra el log del solver")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(message)s")
    lg = logging.getLogger("expansion_lp")

    cfg = RunConfig().with_overrides(
        data_dir=Path(args.data_dir),
        out_dir=Path(args.out) if args.out else None,
        variant=args.variant,
        solver_name=args.solver,
        nse_cost=args.nse_cost,
        capex_sunk=not args.include_capex,
        demand_col=args.demand_col,
        max_hours=args.max_hours,
        tee=args.tee,
    )

    try:
        inputs = load_inputs(cfg)

        if args.sweep_fuel:
            if not args.prices:
                lg.error("--sweep-fuel requiere --prices")
                return 2
            table = read_generator_table(cfg.generators_csv)
            df = sweep_fuel_cost(inputs, table, args.sweep_fuel, args.prices, cfg.solver_name)
            lg.info("Barrido %s:\n%s", args.sweep_fuel, df.to_string(index=False))
            if cfg.out_dir is not None:
                cfg.out_dir.mkdir(parents=True, exist_ok=True)
                df.to_csv(cfg.out_dir / f"sweep_{args.sweep_fuel}.csv", index=False)
            return 0

        result = run_expansion(inputs, cfg.solver_name, tee=cfg.tee, options=cfg.solver_options)
    except InvalidInput as exc:
        lg.error("Datos inválidos: %s", exc)
        return 2
    except SolverError as exc:
        lg.error("Solver: %s", exc)
        return 3

    with pd.option_context("display.float_format", "{:,.2f}".format):
        lg.info("=== Resultado de optimización ===")
        lg.info("Costo total: %s $", f"{result.objective:,.0f}")
        lg.info("\n%s", result.summary.to_string(index=False))
        lg.info("\n%s", result.costs.to_string(index=False))

    if cfg.out_dir is not None:
        result.export(cfg.out_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
