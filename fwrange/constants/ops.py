# Arithmetic
ADD = 'add'
SUB = 'sub'
MUL = 'mul'
SDIV = 'sdiv'
UDIV = 'udiv'
SREM = 'srem'
UREM = 'urem'

# Bitwise
AND = 'and'
OR = 'or'
XOR = 'xor'
SHL = 'shl'
LSHR = 'lshr'
ASHR = 'ashr'

# Comparisons
EQ = 'eq'
NE = 'ne'
SLT = 'slt'
SLE = 'sle'
SGT = 'sgt'
SGE = 'sge'
ULT = 'ult'
ULE = 'ule'
UGT = 'ugt'
UGE = 'uge'

# Casts
TRUNC = 'trunc'
EXT = 'ext'
