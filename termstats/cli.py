# termstats/cli.py
from __future__ import annotations
import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from termstats.analysis import CorpusAnalysis, ThemeAnalyzer
from termstats.config import DEFAULT_CONFIG, CorpusConfig, load_config
from termstats.errors import InputUnavailable, InvariantViolation, TermStatsError, TokenNotFound
from termstats.preprocess import TextPreprocessor

logger = logging.getLogger("termstats")

GREEN_BOLD = "\x1b[1;32m"
RESET = "\x1b[0m"
PRINT_WIDTH = 60


# ----------------------------- CLI -----------------------------

def parse_args(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(description="TF / IDF / TF-IDF des mots d'un corpus de textes par thème.")
    p.add_argument("--text-dir", type=str, default=None,
                   help="Dossier des fichiers {thème}_{texte}.txt (défaut: celui de la config).")
    p.add_argument("--config", type=str, default=None,
                   help="Fichier JSON décrivant les thèmes (défaut: corpus de démonstration).")
    p.add_argument("--no-stem", action="store_true", help="Désactive le stemming (Porter).")
    p.add_argument("--no-stop-words", action="store_true", help="Garde les stop words.")
    p.add_argument("--strip-accents", action="store_true", help="Translittère les lettres accentuées en ASCII.")
    p.add_argument("--top", type=int, default=10, help="Nombre de mots TF-IDF affichés par document.")
    p.add_argument("--show-tokens", action="store_true", help="Affiche les tokens de chaque document.")
    p.add_argument("--matrix", action="store_true", help="Affiche la matrice mot x document.")
    p.add_argument("--presence", action="store_true", help="Matrice en présence (0/1) plutôt qu'en occurrences.")
    p.add_argument("--no-color", action="store_true", help="Pas de couleurs ANSI.")
    p.add_argument("--verbose", "-v", action="store_true", help="Logs détaillés.")
    return p.parse_args(argv)


# ------------------------ Affichage ------------------------

def _title(text: str, color: bool) -> str:
    return f"{GREEN_BOLD}{text}{RESET}" if color else text


def print_words(analysis: CorpusAnalysis, color: bool = True) -> None:
    names = analysis.config.theme_names
    for doc in analysis.documents:
        print("\n" + _title(f"GROUP: `{names[doc.theme]}`, TEXT: `{doc.name}`", color))
        # retour à la ligne dès qu'on dépasse PRINT_WIDTH caractères
        width = 0
        line = []
        for word in doc.tokens:
            line.append(word)
            width += len(word)
            if width >= PRINT_WIDTH:
                print(" ".join(line))
                line, width = [], 0
        if line:
            print(" ".join(line))


def print_theme_text_matrix(config: CorpusConfig, color: bool = True) -> None:
    print("\n" + _title("THEME x TEXT MATRIX:", color))
    print(f"{'text index':12}" + "".join(f"{i:2} " for i in range(config.text_count)))
    for name, row in zip(config.theme_names, config.membership_matrix()):
        print(f"{name:12}{row.tolist()}")


def print_word_document_matrix(analysis: CorpusAnalysis, presence: bool = False, color: bool = True) -> None:
    m = analysis.matrix
    cells = m.presence().astype(int) if presence else m.counts
    width = max([len(w) for w in m.words] + [10])
    print("\n" + _title("WORD x TEXT MATRIX:", color))
    print(f"{'':{width}} " + "".join(f"{j:4}" for j in range(len(m.documents))))
    for word, row in zip(m.words, cells):
        print(f"{word:{width}} " + "".join(f"{int(c):4}" for c in row))


def print_top_terms(analysis: CorpusAnalysis, top: int = 10, color: bool = True) -> None:
    names = analysis.config.theme_names
    for i, doc in enumerate(analysis.documents):
        print("\n" + _title(f"TF-IDF `{names[doc.theme]}` / `{doc.name}`:", color))
        s = analysis.scores[i]
        # affichage du rang sur 2 caractères, du mot sur 18, des scores avec 4 décimales
        for r, (word, score) in enumerate(analysis.distinctive_terms(i, top), 1):
            print(f"{r:2d}. {word:18s} tf={s.tf[word]:.4f} idf={analysis.idf[word]:.4f} tf-idf={score:.4f}")


def _describe_failure(err: TermStatsError) -> str:
    if isinstance(err, InputUnavailable):
        return f"lecture du document {err.path}: {err}"
    if isinstance(err, TokenNotFound):
        return f"vocabulaire, mot {err.token!r}: {err}"
    if isinstance(err, InvariantViolation):
        return f"calcul des scores, mot {err.token!r}: {err}"
    return str(err)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    color = not args.no_color

    if args.config:
        try:
            config = load_config(args.config, text_dir=args.text_dir)
        except (OSError, ValueError) as e:
            # json.JSONDecodeError est un ValueError
            print(f"Échec: configuration {args.config}: {e}", file=sys.stderr)
            return 1
    else:
        config = DEFAULT_CONFIG
        if args.text_dir:
            config = replace(config, text_dir=args.text_dir)
    preproc = TextPreprocessor(
        use_stemming=not args.no_stem,
        stop_words=() if args.no_stop_words else None,
        strip_accents=args.strip_accents,
    )
    logger.debug("Corpus: %d thèmes, %d textes dans %s", config.theme_count, config.text_count, config.text_dir)

    try:
        analysis = ThemeAnalyzer(config, preproc).run()
    except TermStatsError as e:
        # pas de résultats partiels : on signale l'étape et on s'arrête
        print(f"Échec: {_describe_failure(e)}", file=sys.stderr)
        return 1

    if args.show_tokens:
        print_words(analysis, color)
    print_theme_text_matrix(config, color)
    if args.matrix or args.presence:
        print_word_document_matrix(analysis, presence=args.presence, color=color)
    print_top_terms(analysis, args.top, color)
    print("")
    return 0


if __name__ == "__main__":
    sys.exit(main())
