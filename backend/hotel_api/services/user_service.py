"""
用户服务
员工与客人账户；密码以 bcrypt 哈希存储
"""
from typing import List, Optional
from datetime import date
import logging
from sqlalchemy import or_
from sqlalchemy.orm import Session
from hotel_api.models.entities import User, UserRole
from hotel_api.models.schemas import UserCreate, UserUpdate, PasswordChange
from hotel_api.security.passwords import get_password_hash, verify_password
from hotel_api.services.errors import NotFoundError
from hotel_api.services.filters import user_filters

logger = logging.getLogger(__name__)


class UserService:
    """用户服务"""

    def __init__(self, db: Session):
        self.db = db

    def get_users(self, role: Optional[UserRole] = None) -> List[User]:
        """获取用户列表，最新注册的在前"""
        return self.db.query(User).filter(*user_filters(role)).order_by(
            User.created_at.desc(), User.id.desc()
        ).all()

    def get_user(self, user_id: int) -> Optional[User]:
        """获取单个用户"""
        return self.db.query(User).filter(User.id == user_id).first()

    def create_user(self, data: UserCreate) -> User:
        """创建用户"""
        existing = self.db.query(User).filter(
            or_(User.email == data.email, User.username == data.username)
        ).first()
        if existing:
            logger.info(f"User already exists with email {data.email} or username {data.username}")
            raise ValueError("User already exists")

        user = User(
            **data.model_dump(exclude={'password', 'joining_date'}),
            password_hash=get_password_hash(data.password),
            joining_date=data.joining_date or date.today(),
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        logger.info(f"User created successfully with ID: {user.id}")
        return user

    def update_user(self, user_id: int, data: UserUpdate) -> User:
        """更新用户资料"""
        user = self.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")

        update_data = data.model_dump(exclude_unset=True)
        # address 允许清空，其余字段忽略空值
        update_data = {
            key: value for key, value in update_data.items()
            if value is not None or key == 'address'
        }

        if 'email' in update_data:
            existing = self.db.query(User).filter(User.email == update_data['email']).first()
            if existing and existing.id != user_id:
                raise ValueError("Email already in use")

        for key, value in update_data.items():
            setattr(user, key, value)

        self.db.commit()
        self.db.refresh(user)
        return user

    def change_password(self, user_id: int, data: PasswordChange) -> None:
        """修改密码"""
        user = self.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")

        if not verify_password(data.current_password, user.password_hash):
            raise ValueError("Current password is incorrect")

        user.password_hash = get_password_hash(data.new_password)
        self.db.commit()

    def delete_user(self, user_id: int) -> None:
        """删除用户"""
        user = self.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")

        self.db.delete(user)
        self.db.commit()
