# Los módulos EasyCalcLexer/EasyCalcParser/EasyCalcVisitor se generan desde EasyCalc.g4.
