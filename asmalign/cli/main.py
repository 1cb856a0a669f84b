# asmalign/cli/main.py
# Uso:
#   asmalign listing.asm                  -> imprime el listado alineado en stdout
#   asmalign listing.asm -o out.asm       -> lo escribe en un archivo
#   asmalign listing.asm --dump-lines     -> muestra las líneas clasificadas (debug)
#
# Códigos de salida: 0 ok, 1 error de lectura/escritura, 2 uso, 3 error estructural

import argparse
import logging
import os
import sys
from typing import List, Optional

from asmalign.core.config import INDENT_SIZE, FormatConfig
from asmalign.core.errors import AsmAlignError, ConfigError, SourceReadError
from asmalign.core.formatter import AsmFormatter

logger = logging.getLogger("asmalign")

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def read_source(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise SourceReadError(path, f"no es texto UTF-8 válido ({e.reason})") from e
    except OSError as e:
        raise SourceReadError(path, e.strerror or str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asmalign",
        description="Reformatea un listado ensamblador alineando operandos y comentarios",
    )
    parser.add_argument("path", help="archivo .asm de entrada")
    parser.add_argument("-o", "--output", help="escribe el resultado en este archivo en vez de stdout")
    parser.add_argument("--indent-size", type=int, default=INDENT_SIZE,
                        help=f"espacios por nivel de indentación (default {INDENT_SIZE})")
    parser.add_argument("--full-data-declaration", action="store_true",
                        help="en líneas de datos con comentario conserva toda la declaración")
    parser.add_argument("--dump-lines", action="store_true",
                        help="imprime las líneas clasificadas en vez del listado")
    parser.add_argument("-v", "--verbose", action="store_true", help="logging DEBUG")
    return parser


def run(args: argparse.Namespace, stdout=None) -> int:
    stdout = stdout or sys.stdout
    config = FormatConfig(indent_size=args.indent_size,
                          full_data_declaration=args.full_data_declaration)
    formatter = AsmFormatter(config)
    text = read_source(args.path)

    if args.dump_lines:
        for line in formatter.classify(text):
            stdout.write(line.describe() + "\n")
        return 0

    out = formatter.format(text)
    if args.output:
        try:
            os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(out)
        except OSError as e:
            raise SourceReadError(args.output, e.strerror or str(e)) from e
        logger.info("escrito %s (%d líneas)", args.output, len(formatter.lines))
    else:
        stdout.write(out)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format=LOG_FORMAT, stream=sys.stderr)
    try:
        return run(args)
    except ConfigError as e:
        logger.error("Configuración inválida: %s", e)
        return 2
    except SourceReadError as e:
        logger.error("%s", e)
        return 1
    except AsmAlignError as e:
        logger.error("Error estructural: %s", e)
        return 3


if __name__ == "__main__":
    sys.exit(main())
