"""Tokenize a pseudocode statement in 3 lines, zero config, zero deps."""

from analiser import tokenize

for token in tokenize('se idade >= 18 entao escreve("maior") fim-se'):
    print(token)
