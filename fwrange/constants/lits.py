TRUE = 'True'
FALSE = 'False'
