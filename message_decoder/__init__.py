from message_decoder.decoder import Decoder, decode_char, decode_line
from message_decoder.message import Message

__all__ = ['Decoder', 'Message', 'decode_char', 'decode_line']
