"""
esovm — Machine Configuration
=============================

Fixed sizes and addresses for both machines. The tape size is the only
value a caller can change at run time (``stack_size=`` keyword on the
brainfuck machine); everything else is part of the instruction set.
"""


# =============================================================================
#  TAPE MACHINE (brainfuck)
# =============================================================================
STACK_SIZE = 1 << 16      # 65536 tape cells, zero-initialised


# =============================================================================
#  REGISTER MACHINE (Byte Syze)
# =============================================================================
MEMORY_SIZE = 256         # unified program + data store
HALT_ADDRESS = 255        # IR reaching this value stops the machine


# =============================================================================
#  SHARED
# =============================================================================
BYTE_MASK = 0xFF          # 8-bit wrap for cells, registers, addresses
