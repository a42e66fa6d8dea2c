
class OrdTreeError(Exception):
    def __str__(self):
        return ''.join(map(str, self.args))

class InvalidTypeError(OrdTreeError):
    def __str__(self):
        return "invalid value type: " + ''.join(map(str, self.args))

class FileParseError(OrdTreeError):
    def __init__(self, filename, line, msg):
        super(FileParseError, self).__init__(filename, line, msg)
        self.filename = filename
        self.line = line
        self.msg = msg
    def __str__(self):
        return self.filename + ':' + str(self.line) + ": " + str(self.msg)
