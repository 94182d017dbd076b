# validbr/cli.py
from __future__ import annotations
import argparse
import random
from pathlib import Path
from typing import List, Optional

import pandas as pd

from validbr.errors import DocumentError, InvalidBranchNumber
from validbr.models.cnpj import Branch
from validbr.services.batch import KINDS, validate_column
from validbr.services.generator import configured_branch, random_cnpj, random_cpf
from validbr.utils.logs import get_logger


def cmd_check(args: argparse.Namespace) -> int:
    model = KINDS[args.kind]
    invalid = 0
    for value in args.values:
        try:
            print(f"{value}\t{model.parse(value)}")
        except DocumentError as e:
            invalid += 1
            print(f"{value}\tERRO: {e}")
    return 1 if invalid else 0


def cmd_generate(args: argparse.Namespace) -> int:
    log = get_logger("validbr.cli")
    rng = random.Random(args.seed) if args.seed is not None else None
    if args.branch and args.kind != "cnpj":
        log.error("--branch só vale para CNPJ")
        return 2
    branch = None
    if args.kind == "cnpj":
        try:
            # --branch tem prioridade; senão VALIDBR_CNPJ_BRANCH
            branch = Branch.parse(args.branch) if args.branch else configured_branch()
        except InvalidBranchNumber as e:
            log.error(str(e))
            return 2
    for _ in range(args.n):
        doc = random_cpf(rng=rng) if args.kind == "cpf" else random_cnpj(branch=branch, rng=rng)
        print(doc)
    return 0


def cmd_batch(args: argparse.Namespace) -> int:
    log = get_logger("validbr.cli")
    src = Path(args.csv)
    if not src.exists():
        raise SystemExit(f"Arquivo não encontrado: {src}")
    out = Path(args.out) if args.out else src.with_name(f"{src.stem}_validated.csv")

    df = pd.read_csv(src, dtype=str, keep_default_na=True)
    try:
        res = validate_column(df, args.column, args.kind)
    except KeyError as e:
        raise SystemExit(e.args[0]) from e

    out.parent.mkdir(parents=True, exist_ok=True)
    res.to_csv(out, index=False)

    ok = int(res[f"{args.column}_valid"].sum())
    log.info(f"{ok} válidos, {len(res) - ok} inválidos de {len(res)} linhas")
    log.info(f"resultado salvo em {out}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="validbr", description="Validação de CPF e CNPJ")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("check", help="valida e formata um ou mais documentos")
    p.add_argument("kind", choices=sorted(KINDS))
    p.add_argument("values", nargs="+")
    p.set_defaults(func=cmd_check)

    p = sub.add_parser("generate", help="gera documentos válidos aleatórios (para testes)")
    p.add_argument("kind", choices=sorted(KINDS))
    p.add_argument("-n", type=int, default=1)
    p.add_argument("--branch", default=None, help="filial fixa do CNPJ, ex.: 0001")
    p.add_argument("--seed", type=int, default=None)
    p.set_defaults(func=cmd_generate)

    p = sub.add_parser("batch", help="valida uma coluna de um CSV")
    p.add_argument("--csv", required=True)
    p.add_argument("--column", required=True)
    p.add_argument("--kind", choices=sorted(KINDS), required=True)
    p.add_argument("--out", default=None, help="default: <csv>_validated.csv")
    p.set_defaults(func=cmd_batch)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        get_logger("validbr.cli")
    except ValueError as e:
        raise SystemExit(str(e)) from e
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
