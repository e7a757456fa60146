"""Interactive terminal front end for the Tower of Hanoi game."""

from __future__ import annotations

import argparse
import os
import re
import subprocess
import sys
from collections.abc import Callable
from typing import TextIO

from .game import NUM_PEGS, HanoiGame, IllegalMoveError
from .history import HISTORY_FILE, MAX_NAME_LENGTH, GameRecord, History

MIN_DISCS = 1
MAX_DISCS = 10

_PEG_LETTERS = "abc"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

InputFn = Callable[[], str]


def peg_from_char(char: str) -> int:
    """Return the peg index for a letter A, B or C (any case)."""
    index = _PEG_LETTERS.find(char.lower()) if len(char) == 1 else -1
    if index < 0:
        raise ValueError(f"not a peg letter: {char!r}")
    return index


def peg_to_char(index: int) -> str:
    """Return the letter of a peg, or '?' for an index that names no peg."""
    if 0 <= index < NUM_PEGS:
        return chr(ord("A") + index)
    return "?"


def _ask(prompt: str, input_fn: InputFn, output: TextIO) -> str:
    output.write(prompt)
    output.flush()
    return input_fn()


def _parse_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def _clear_screen(output: TextIO) -> None:
    isatty = getattr(output, "isatty", None)
    if isatty is not None and isatty():
        subprocess.run("cls" if os.name == "nt" else "clear", shell=True, check=False)


def _show_game(game: HanoiGame, output: TextIO) -> None:
    _clear_screen(output)
    output.write(game.render())


def play_match(
    game: HanoiGame,
    history: History,
    player_name: str,
    history_path: str | os.PathLike = HISTORY_FILE,
    input_fn: InputFn = input,
    output: TextIO | None = None,
) -> bool:
    """Play one match until it is won or the player leaves; return True on a win.

    A win is added to the history, which is then saved to ``history_path``.
    """
    out = output if output is not None else sys.stdout
    num_discs = game.num_discs

    while not game.is_won():
        _show_game(game, out)
        source, target = game.next_optimal_move()
        out.write(f"\nSugestao de jogada: {peg_to_char(source)} -> {peg_to_char(target)}\n")
        out.write(f"Jogador: {player_name} | Discos: {num_discs}\n")
        try:
            line = _ask(
                "Mover de [A,B,C] para [A,B,C] (ex: AB). 'R' para Reiniciar, 'S' para Sair: ",
                input_fn,
                out,
            )
        except EOFError:
            return False

        first = line[:1].lower()
        if first == "r":
            out.write("\n Reiniciando a partida!\n")
            game.reset(num_discs)
            continue
        if first == "s":
            out.write("\nVoltando para o menu principal...\n")
            return False

        text = line.lstrip()
        if not text:
            out.write("Formato invalido. Digite as duas letras juntas (ex: AC).\n")
            continue
        first_char, second_char = (text + "\n")[:2]
        try:
            origin = peg_from_char(first_char)
            destination = peg_from_char(second_char)
        except ValueError:
            out.write("Entrada invalida. Use as letras A, B ou C para os pinos.\n")
            continue
        try:
            game.move(origin, destination)
        except IllegalMoveError:
            pass

    _show_game(game, out)
    out.write(f"\nParabens, {player_name}! Voce venceu em {game.moves} movimentos!\n")
    history.add(game.moves, player_name, num_discs)
    history.save(history_path)
    return True


def search_history(
    history: History,
    input_fn: InputFn = input,
    output: TextIO | None = None,
) -> list[GameRecord]:
    """Ask for a search by name or by date, print and return the matching records."""
    out = output if output is not None else sys.stdout
    if len(history) == 0:
        out.write("Nenhum historico para buscar.\n")
        return []

    out.write("\nBuscar historico por:\n")
    out.write("1. Nome do jogador\n")
    out.write("2. Data (formato DD/MM/AAAA)\n")
    choice = _parse_int(_ask("Escolha uma opcao: ", input_fn, out))
    if choice is None:
        out.write("Opcao invalida.\n")
        return []

    found: list[GameRecord] = []
    if choice == 1:
        term = _ask("Digite o nome do jogador: ", input_fn, out)[: MAX_NAME_LENGTH - 1]
        out.write(f"\n Resultados da Busca por Nome: '{term}'\n")
        found = history.search_by_name(term)
    elif choice == 2:
        term = _ask("Digite a data (DD/MM/AAAA): ", input_fn, out)[: MAX_NAME_LENGTH - 1]
        out.write(f"\n Resultados da Busca por Data: '{term}'\n")
        found = history.search_by_date(term)
    else:
        out.write("Opcao invalida.\n")

    for record in found:
        out.write(record.describe("Data/Hora") + "\n")
    if not found:
        out.write("Nenhum registro encontrado para a busca.\n")
    return found


def _new_games(
    history: History, history_path: str | os.PathLike, input_fn: InputFn, out: TextIO
) -> None:
    player_name = _ask("Digite seu nome: ", input_fn, out)[: MAX_NAME_LENGTH - 1]
    while True:
        num_discs = _parse_int(
            _ask(
                f"\nDigite o numero de discos para esta partida "
                f"(min. {MIN_DISCS}, max. {MAX_DISCS}): ",
                input_fn,
                out,
            )
        )
        if num_discs is None:
            out.write("Entrada invalida. Digite um numero.\n")
            continue
        if not MIN_DISCS <= num_discs <= MAX_DISCS:
            out.write(f"Numero de discos invalido. Escolha entre {MIN_DISCS} e {MAX_DISCS}.\n")
            continue

        game = HanoiGame(num_discs)
        play_match(game, history, player_name, history_path, input_fn, out)

        again = _ask("\nDeseja jogar outra partida? (s/n): ", input_fn, out).strip()
        if again[:1].lower() != "s":
            return


def _menu(history_path: str | os.PathLike, input_fn: InputFn, out: TextIO) -> None:
    history = History.load(history_path)
    while True:
        out.write("\n Menu Torre de Hanoi \n")
        out.write("1. Novo Jogo\n")
        out.write("2. Ver Historico\n")
        out.write("3. Buscar no Historico\n")
        out.write("4. Sair\n")
        choice = _parse_int(_ask("Escolha uma opcao: ", input_fn, out))
        if choice is None:
            out.write("Entrada invalida. Digite um numero.\n")
            continue

        if choice == 1:
            _new_games(history, history_path, input_fn, out)
        elif choice == 2:
            out.write(history.render())
            _ask("\nPressione Enter para continuar...", input_fn, out)
        elif choice == 3:
            search_history(history, input_fn, out)
            _ask("\nPressione Enter para continuar...", input_fn, out)
        elif choice == 4:
            out.write("Saindo do jogo. Ate mais!\n")
            return
        else:
            out.write("Opcao invalida. Tente novamente.\n")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu; return the exit status."""
    parser = argparse.ArgumentParser(prog="torre-hanoi", description="Torre de Hanoi")
    parser.add_argument(
        "--history-file",
        default=HISTORY_FILE,
        help="file where finished games are kept",
    )
    args = parser.parse_args(argv)
    try:
        _menu(args.history_file, input, sys.stdout)
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())