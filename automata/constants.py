# Transition symbol consumed without reading input, as in the dict transition format
EPSILON = ''

EPSILON_DISPLAY = 'ε'
