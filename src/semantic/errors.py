# Fallos internos del análisis. No son diagnósticos para el usuario:
# indican que el árbol de entrada viola algún invariante.
class InternalFault(Exception):
    def __init__(self, msg, line=None, col=None):
        where = f" (line {line}, col {col})" if line is not None else ""
        super().__init__(msg + where)
        self.line = line
        self.col = col


class StackUnderflow(InternalFault):
    def __init__(self, msg="pop from empty type stack", line=None, col=None):
        super().__init__(msg, line, col)


class StackImbalance(InternalFault):
    pass


class MalformedTree(InternalFault):
    pass
