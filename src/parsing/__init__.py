"""Parser externo de EasyCalc (ANTLR)."""
