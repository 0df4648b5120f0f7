"""LLVM IR code generation for Soloman programs.

Takes a `ProgramNode` and returns the text of an LLVM module whose `main`
prints each statement's value with `printf("%lld\\n", value)`, in program
order, and returns 0.

Arithmetic is lowered to the `llvm.sadd.with.overflow.i64` and
`llvm.smul.with.overflow.i64` intrinsics. After every operation the overflow
bit branches to a shared `overflow` block that returns 1, so a compiled
program stops at the same point the interpreter would raise `Overflow`.

Example output for `print 1 + 2;`:

    define i32 @main() {
    entry:
      %t0 = call { i64, i1 } @llvm.sadd.with.overflow.i64(i64 1, i64 2)
      %t1 = extractvalue { i64, i1 } %t0, 0
      %t2 = extractvalue { i64, i1 } %t0, 1
      br i1 %t2, label %overflow, label %cont0
    cont0:
      %t3 = call i32 (ptr, ...) @printf(ptr @fmt, i64 %t1)
      ret i32 0
    overflow:
      ret i32 1
    }

The module uses opaque pointers (`ptr`), so it needs LLVM 15 or newer.
`build_executable` writes the module to disk and links it with clang
(`clang out.ll -o out`).
"""

import subprocess
from typing import Dict, List, Optional
from ast_nodes import *
from errors import EvalError


_INTRINSICS: Dict[BinaryOperator, str] = {
    BinaryOperator.ADD: "llvm.sadd.with.overflow.i64",
    BinaryOperator.MULTIPLY: "llvm.smul.with.overflow.i64",
}


class LLVMEmitter:
    def __init__(self, module_name: str = "soloman"):
        self.module_name = module_name
        self.lines: List[str] = []
        self.tmp_counter = 0
        self.label_counter = 0

    def fresh_tmp(self) -> str:
        name = f"%t{self.tmp_counter}"
        self.tmp_counter += 1
        return name

    def fresh_label(self) -> str:
        name = f"cont{self.label_counter}"
        self.label_counter += 1
        return name

    def emit_expr(self, node: ASTNode) -> str:
        """Emit instructions for `node` and return the operand holding its value.

        Operands are lowered post-order (left, right, operator) from an
        explicit stack.
        """
        operands: List[str] = []
        # (node, operands_done)
        stack = [(node, False)]
        while stack:
            current, operands_done = stack.pop()
            match current:
                case IntLiteralNode(value=v):
                    operands.append(str(v))
                case BinaryOpNode(operator=op) if operands_done:
                    rhs = operands.pop()
                    lhs = operands.pop()
                    operands.append(self.emit_checked(op, lhs, rhs))
                case BinaryOpNode(left=l, right=r):
                    stack.append((current, True))
                    stack.append((r, False))
                    stack.append((l, False))
                case _:
                    raise EvalError(
                        f"Cannot compile expression node: {type(current).__name__}",
                        current.line,
                        current.column,
                    )
        return operands.pop()

    def emit_checked(self, op: BinaryOperator, lhs: str, rhs: str) -> str:
        pair, value, flag = self.fresh_tmp(), self.fresh_tmp(), self.fresh_tmp()
        cont = self.fresh_label()
        self.lines.extend(
            [
                f"  {pair} = call {{ i64, i1 }} @{_INTRINSICS[op]}(i64 {lhs}, i64 {rhs})",
                f"  {value} = extractvalue {{ i64, i1 }} {pair}, 0",
                f"  {flag} = extractvalue {{ i64, i1 }} {pair}, 1",
                f"  br i1 {flag}, label %overflow, label %{cont}",
                f"{cont}:",
            ]
        )
        return value

    def emit_statement(self, stmt: ASTNode) -> None:
        match stmt:
            case PrintStatementNode(expression=expr):
                value = self.emit_expr(expr)
                call = self.fresh_tmp()
                self.lines.append(
                    f"  {call} = call i32 (ptr, ...) @printf(ptr @fmt, i64 {value})"
                )
            case _:
                raise EvalError(f"Cannot compile statement node: {stmt}", stmt.line, stmt.column)

    def emit_program(self, program: ProgramNode) -> str:
        self.lines = [
            f"; ModuleID = '{self.module_name}'",
            f'source_filename = "{self.module_name}"',
            "",
            '@fmt = private unnamed_addr constant [6 x i8] c"%lld\\0A\\00"',
            "",
            "declare i32 @printf(ptr, ...)",
        ]
        for intrinsic in _INTRINSICS.values():
            self.lines.append(f"declare {{ i64, i1 }} @{intrinsic}(i64, i64)")
        self.lines.extend(["", "define i32 @main() {", "entry:"])

        for stmt in program.statements:
            self.emit_statement(stmt)

        self.lines.extend(["  ret i32 0", "overflow:", "  ret i32 1", "}"])
        return "\n".join(self.lines) + "\n"


def emit_llvm(program: ProgramNode, module_name: str = "soloman") -> str:
    """Return the textual LLVM IR module for `program`."""
    return LLVMEmitter(module_name).emit_program(program)


def build_executable(
    program: ProgramNode,
    output: str,
    ll_path: Optional[str] = None,
    cc: str = "clang",
    module_name: str = "soloman",
) -> str:
    """Compile `program` into the executable `output`.

    The IR is written to `ll_path` (default `<output>.ll`) and handed to `cc`.
    Returns the IR path. Raises `FileNotFoundError` when `cc` is not installed
    and `subprocess.CalledProcessError` when it exits with an error.
    """
    if ll_path is None:
        ll_path = f"{output}.ll"
    with open(ll_path, "w", encoding="utf-8") as fh:
        fh.write(emit_llvm(program, module_name))
    subprocess.run([cc, ll_path, "-o", output], check=True)
    return ll_path
