'''Interfaces between point set representations used here and external sources of coordinates'''
