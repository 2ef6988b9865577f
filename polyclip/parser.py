import re
from typing import List, Optional, Tuple

from .lexer import Token, tokenize_line
from .scene import PolygonDecl, Scene, Span

_ERROR_LOC_RE = re.compile(r"\[line (\d+), col (\d+)\]")


class Cursor:
    def __init__(self, tokens: List[Token]):
        self.toks = tokens
        self.i = 0

    def peek(self) -> Optional[Token]:
        return self.toks[self.i] if self.i < len(self.toks) else None

    def match(self, *types: str) -> Optional[Token]:
        if self.i < len(self.toks) and self.toks[self.i][0] in types:
            t = self.toks[self.i]
            self.i += 1
            return t
        return None

    def expect(self, *types: str) -> Token:
        t = self.peek()
        if t and t[0] in types:
            self.i += 1
            return t
        want = '|'.join(types)
        if t:
            raise SyntaxError(f'[line {t[2]}, col {t[3]}] expected {want}, got {t[0]}')
        raise SyntaxError(f'Unexpected end of line: expected {want}')


def parse_number(cur: Cursor) -> float:
    sign = 1.0
    t = cur.match('MINUS', 'PLUS')
    if t and t[0] == 'MINUS':
        sign = -1.0
    return sign * float(cur.expect('NUMBER')[1])


def parse_point(cur: Cursor) -> Tuple[float, float]:
    cur.expect('LPAREN')
    x = parse_number(cur)
    cur.expect('COMMA')
    y = parse_number(cur)
    cur.expect('RPAREN')
    return (x, y)


def parse_polygon(cur: Cursor) -> PolygonDecl:
    kw = cur.expect('ID')
    if kw[1].lower() != 'polygon':
        raise SyntaxError(f"[line {kw[2]}, col {kw[3]}] expected keyword 'polygon', got '{kw[1]}'")
    name_tok = cur.expect('ID')
    cur.match('COLON')
    points: List[Tuple[float, float]] = []
    while cur.peek() is not None:
        points.append(parse_point(cur))
    if not points:
        raise SyntaxError(
            f'[line {name_tok[2]}, col {name_tok[3]}] polygon {name_tok[1]} has no points'
        )
    return PolygonDecl(name_tok[1], points, Span(kw[2], kw[3]))


def _augment_syntax_error(err: SyntaxError, line_text: str) -> Optional[SyntaxError]:
    message = str(err)
    if not line_text or "\n" in message:
        return None
    match = _ERROR_LOC_RE.search(message)
    if not match:
        return None
    col = max(int(match.group(2)), 1)
    caret_line = " " * (col - 1) + "^"
    snippet = f"    {line_text.rstrip()}\n    {caret_line}"
    return SyntaxError(f"{message}\n{snippet}")


def parse_scene(text: str) -> Scene:
    scene = Scene()
    for i, raw in enumerate(text.splitlines(), start=1):
        try:
            tokens = tokenize_line(raw, i)
            if not tokens:
                continue
            decl = parse_polygon(Cursor(tokens))
        except SyntaxError as err:
            augmented = _augment_syntax_error(err, raw)
            if augmented is None:
                raise
            raise augmented from None
        if decl.name in scene.polygons:
            first = scene.polygons[decl.name].span
            raise SyntaxError(
                f'[line {decl.span.line}, col {decl.span.col}] polygon {decl.name} '
                f'already declared at line {first.line}'
            )
        scene.polygons[decl.name] = decl
    return scene
