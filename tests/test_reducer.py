import unittest
from eqsolve.errors import EmptyExpression, MalformedOperatorPlacement, MissingOperator
from eqsolve.frontend.expression import *
from eqsolve.frontend.lexer import tokenize
from eqsolve.frontend.parser import parse
from eqsolve.frontend.reducer import reduce, reduce_pass
from eqsolve.frontend.tokens import Operand, Operator, add_ops, mul_ops

class TestReducePass(unittest.TestCase):
    def test_mul_pass_leaves_add(self):
        toks = reduce_pass(tokenize('1+2*3'), mul_ops)
        self.assertEqual(len(toks), 3)
        self.assertEqual(toks[1], Operator(OpKind.ADD, 1))
        self.assertEqual(toks[2], Operand(Mul(Number(2), Number(3)), 2))

    def test_pass_chains_left_to_right(self):
        toks = reduce_pass(tokenize('8/2/2'), mul_ops)
        self.assertEqual(len(toks), 1)
        self.assertEqual(toks[0].expr, Div(Div(Number(8), Number(2)), Number(2)))

    def test_pass_is_in_place(self):
        toks = tokenize('1+1')
        self.assertIs(reduce_pass(toks, add_ops), toks)
        self.assertEqual(len(toks), 1)

    def test_boundaries_untouched(self):
        toks = reduce_pass(tokenize('*5*'), mul_ops)
        self.assertEqual(len(toks), 3)

    def test_doubled_operator(self):
        with self.assertRaises(MalformedOperatorPlacement) as ctx:
            reduce_pass(tokenize('5**5'), mul_ops)
        self.assertEqual(ctx.exception.position, 1)

class TestReduce(unittest.TestCase):
    def test_empty(self):
        with self.assertRaises(EmptyExpression):
            reduce([])

    def test_single_number(self):
        self.assertEqual(parse('42'), Number(42))

    def test_simple_tree(self):
        self.assertEqual(parse('2+2'), Add(Number(2), Number(2)))

    def test_precedence_shape(self):
        self.assertEqual(parse('3*2+2'), Add(Mul(Number(3), Number(2)), Number(2)))
        self.assertEqual(parse('2+2*3'), Add(Number(2), Mul(Number(2), Number(3))))

    def test_left_associative_shape(self):
        self.assertEqual(parse('10-4-3'), Sub(Sub(Number(10), Number(4)), Number(3)))
        self.assertEqual(parse('12/4/3'), Div(Div(Number(12), Number(4)), Number(3)))

    def test_mixed_shape(self):
        tree = parse('2 - 2*3 + 5')
        self.assertEqual(tree, Add(Sub(Number(2), Mul(Number(2), Number(3))), Number(5)))
        self.assertEqual(str(tree), 'Add(Sub(Number(2), Mul(Number(2), Number(3))), Number(5))')

    def test_leading_operator(self):
        for src in ['+5', '-5', '*5', '/5+1']:
            with self.assertRaises(MalformedOperatorPlacement):
                parse(src)

    def test_trailing_operator(self):
        with self.assertRaises(MalformedOperatorPlacement) as ctx:
            parse('5+')
        self.assertEqual(ctx.exception.kind, OpKind.ADD)
        self.assertEqual(ctx.exception.position, 1)

    def test_doubled_operator(self):
        for src in ['5++5', '5+*5', '5*-5', '5 - - 5']:
            with self.assertRaises(MalformedOperatorPlacement):
                parse(src)

    def test_lone_operator(self):
        with self.assertRaises(MalformedOperatorPlacement):
            parse('-')

    def test_missing_operator(self):
        with self.assertRaises(MissingOperator) as ctx:
            parse('1 2')
        self.assertEqual(ctx.exception.position, 2)
        with self.assertRaises(MissingOperator):
            parse('3 4*5')
