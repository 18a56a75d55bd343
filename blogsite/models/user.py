"""
User Model
"""

from datetime import datetime

from flask_login import UserMixin

from blogsite.extensions import db


class User(UserMixin, db.Model):
    """A registered author. The identifier is chosen at sign-up."""
    __tablename__ = 'users'
    
    user_id = db.Column(db.String(80), primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    date_created = db.Column(db.DateTime, default=datetime.utcnow)
    
    blogs = db.relationship('Blog', backref='creator', lazy=True)
    
    def get_id(self):
        return self.user_id
    
    def __repr__(self):
        return f'<User {self.user_id}>'
