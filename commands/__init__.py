# commands package - one module per command family
