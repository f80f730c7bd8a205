class Arithmetic:
    """
    Integer addition and subtraction.
    Stateless: every method is a classmethod and no instance is needed.
    """

    @classmethod
    def add(cls, a: int, b: int) -> int:
        """
        a (int): The first operand
        b (int): The second operand

        Returns the sum of a and b
        """
        return a + b

    @classmethod
    def subtract(cls, a: int, b: int) -> int:
        """
        a (int): The minuend
        b (int): The subtrahend, subtracted from a

        Returns the difference a - b
        """
        return a - b


add = Arithmetic.add
subtract = Arithmetic.subtract
